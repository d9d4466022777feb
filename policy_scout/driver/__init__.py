"""Page drivers used by the traversal."""
from policy_scout.driver.base import NavigationResult, PageDriver

__all__ = ["NavigationResult", "PageDriver"]
