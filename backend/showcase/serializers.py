"""Plain-dict views of the models, as returned to the HTTP layer.

Never expose ``password_hash``: everything user-shaped goes through
``user_to_dict``.
"""
from showcase.models import User, Category, Project, Comment, Feedback, SiteVisit


def user_to_dict(user: User | None) -> dict | None:
    if user is None:
        return None
    return {
        "id": user.id,
        "email": user.email,
        "nickname": user.nickname,
        "profile_image_url": user.profile_image_url,
        "provider": user.provider,
        "has_set_nickname": user.has_set_nickname,
    }


def category_to_dict(category: Category | None) -> dict | None:
    if category is None:
        return None
    return {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
    }


def project_to_dict(project: Project, is_liked: bool = False, with_relations: bool = True) -> dict:
    data = {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "content": project.content,
        "image_url": project.image_url,
        "video_url": project.video_url,
        "demo_url": project.demo_url,
        "contact_info": project.contact_info,
        "category_id": project.category_id,
        "author_id": project.author_id,
        "view_count": project.view_count or 0,
        "like_count": project.like_count or 0,
        "comment_count": project.comment_count or 0,
        "is_active": project.is_active,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }
    if with_relations:
        data["author"] = user_to_dict(project.author)
        data["category"] = category_to_dict(project.category)
        data["is_liked"] = is_liked
    return data


def comment_to_dict(comment: Comment, with_author: bool = True) -> dict:
    data = {
        "id": comment.id,
        "content": comment.content,
        "project_id": comment.project_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "is_active": comment.is_active,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
    if with_author:
        data["author"] = user_to_dict(comment.author)
    return data


def feedback_to_dict(feedback: Feedback, with_author: bool = True) -> dict:
    data = {
        "id": feedback.id,
        "content": feedback.content,
        "category": feedback.category,
        "author_id": feedback.author_id,
        "is_active": feedback.is_active,
        "created_at": feedback.created_at,
        "updated_at": feedback.updated_at,
    }
    if with_author:
        data["author"] = user_to_dict(feedback.author)
    return data


def visit_to_dict(visit: SiteVisit) -> dict:
    return {
        "id": visit.id,
        "session_id": visit.session_id,
        "user_agent": visit.user_agent,
        "ip_address": visit.ip_address,
        "visit_date": visit.visit_date,
    }
