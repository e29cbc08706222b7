from fastapi import APIRouter

from portfolio.core.modules.blog.models import Blog, BlogCreate, BlogUpdate
from portfolio.web.deps import AppDep, AuthTokenDep
from portfolio.web.openapi import ErrorResponse

router = APIRouter(tags=["admin"])


@router.get(
    "/admin/blogs",
    summary="List all blogs",
    description="Get every blog post including drafts, newest first.",
    operation_id="adminListBlogs",
    responses={
        200: {"description": "All blog posts"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_blogs(app: AppDep, auth_token: AuthTokenDep) -> list[Blog]:
    return await app.get_all_blogs(auth_token)


@router.get(
    "/admin/blogs/{blog_id}",
    summary="Get any blog",
    description="Get a blog post by id, drafts included.",
    operation_id="adminGetBlog",
    responses={
        200: {"description": "Blog post"},
        400: {"model": ErrorResponse, "description": "Invalid blog id"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def get_blog(blog_id: int, app: AppDep, auth_token: AuthTokenDep) -> Blog:
    return await app.get_blog(auth_token, blog_id)


@router.post(
    "/admin/blogs",
    summary="Create blog",
    description="Create a new blog post. The slug must be unique.",
    operation_id="adminCreateBlog",
    status_code=201,
    responses={
        201: {"description": "Blog created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid request data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_blog(req: BlogCreate, app: AppDep, auth_token: AuthTokenDep) -> Blog:
    return await app.create_blog(auth_token, req)


@router.put(
    "/admin/blogs/{blog_id}",
    summary="Update blog",
    description="Update a blog post. Only fields present in the body are changed.",
    operation_id="adminUpdateBlog",
    responses={
        200: {"description": "Blog updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid request data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def update_blog(blog_id: int, req: BlogUpdate, app: AppDep, auth_token: AuthTokenDep) -> Blog:
    return await app.update_blog(auth_token, blog_id, req)


@router.delete(
    "/admin/blogs/{blog_id}",
    summary="Delete blog",
    description="Delete a blog post permanently.",
    operation_id="adminDeleteBlog",
    status_code=204,
    responses={
        204: {"description": "Blog deleted successfully"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def delete_blog(blog_id: int, app: AppDep, auth_token: AuthTokenDep) -> None:
    await app.delete_blog(auth_token, blog_id)
