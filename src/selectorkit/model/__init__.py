from selectorkit.model.category import CATEGORY_RULES, Category, CategoryRule
from selectorkit.model.rectangle import Rectangle

__all__ = ["CATEGORY_RULES", "Category", "CategoryRule", "Rectangle"]
