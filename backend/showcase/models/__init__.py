from showcase.models.user import User
from showcase.models.category import Category
from showcase.models.project import Project
from showcase.models.like import Like
from showcase.models.comment import Comment
from showcase.models.feedback import Feedback, FEEDBACK_CATEGORIES
from showcase.models.visit import SiteVisit

__all__ = ["User", "Category", "Project", "Like", "Comment", "Feedback", "FEEDBACK_CATEGORIES", "SiteVisit"]
