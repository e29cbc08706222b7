import structlog

from portfolio.core.core import Service
from portfolio.core.modules.blog.models import Blog, BlogCreate, BlogUpdate
from portfolio.core.modules.blog.samples import SAMPLE_BLOGS
from portfolio.core.modules.blog.validators import parse_blog_create
from portfolio.errors import NotFoundError

logger = structlog.get_logger(__name__)


class BlogService(Service):
    """Read/write surface over blog posts.

    Public reads never expose drafts: a draft looked up through the public
    methods is reported as missing, same as an unknown id or slug.
    """

    # === Public reads ===
    def list_published(self) -> list[Blog]:
        return self.store.list_blogs(include_drafts=False)

    def get_published(self, blog_id: int) -> Blog:
        blog = self.store.get_blog(blog_id)
        if blog is None or blog.is_draft:
            raise NotFoundError(f"Blog '{blog_id}' not found")
        return blog

    def get_published_by_slug(self, slug: str) -> Blog:
        blog = self.store.get_blog_by_slug(slug)
        if blog is None or blog.is_draft:
            raise NotFoundError(f"Blog with slug '{slug}' not found")
        return blog

    # === Admin ===
    def list_all(self) -> list[Blog]:
        """All blogs including drafts, newest first."""
        return self.store.list_blogs(include_drafts=True)

    def get_blog(self, blog_id: int) -> Blog:
        blog = self.store.get_blog(blog_id)
        if blog is None:
            raise NotFoundError(f"Blog '{blog_id}' not found")
        return blog

    def create_blog(self, payload: BlogCreate) -> Blog:
        return self.store.create_blog(payload)

    def update_blog(self, blog_id: int, payload: BlogUpdate) -> Blog:
        """Apply a partial update. Fields missing from the payload keep their values."""
        return self.store.update_blog(blog_id, payload.changes())

    def delete_blog(self, blog_id: int) -> None:
        if not self.store.delete_blog(blog_id):
            raise NotFoundError(f"Blog '{blog_id}' not found")

    def seed_sample_blogs(self) -> None:
        for data in SAMPLE_BLOGS:
            if self.store.get_blog_by_slug(data["slug"]) is None:
                self.store.create_blog(parse_blog_create(data))

    async def on_start(self) -> None:
        if self.core.config.seed_sample_blogs:
            self.seed_sample_blogs()
        logger.debug("blog_service_started", blog_count=self.store.count_blogs())
