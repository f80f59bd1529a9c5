"""Core business logic layer.

Subpackages:
- menu: shopping list calculations and distribution maintenance
- reporting: food & beverage report aggregations
- procurement: purchase-order lines per menu item
"""
__all__ = ["menu", "reporting", "procurement"]
