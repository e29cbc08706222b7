from fastapi import APIRouter

from portfolio.core.modules.blog.models import Blog
from portfolio.web.deps import AppDep
from portfolio.web.openapi import ErrorResponse

router = APIRouter(tags=["blogs"])


@router.get(
    "/blogs",
    summary="List published blogs",
    description="Get all published blog posts, newest first. Drafts are never included.",
    operation_id="listBlogs",
    responses={
        200: {"description": "Published blog posts"},
    },
)
async def list_blogs(app: AppDep) -> list[Blog]:
    return await app.get_published_blogs()


@router.get(
    "/blogs/slug/{slug}",
    summary="Get blog by slug",
    description="Get a published blog post by its slug.",
    operation_id="getBlogBySlug",
    responses={
        200: {"description": "Blog post"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def get_blog_by_slug(slug: str, app: AppDep) -> Blog:
    return await app.get_published_blog_by_slug(slug)


@router.get(
    "/blogs/{blog_id}",
    summary="Get blog by id",
    description="Get a published blog post by its numeric id.",
    operation_id="getBlog",
    responses={
        200: {"description": "Blog post"},
        400: {"model": ErrorResponse, "description": "Invalid blog id"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def get_blog(blog_id: int, app: AppDep) -> Blog:
    return await app.get_published_blog(blog_id)
