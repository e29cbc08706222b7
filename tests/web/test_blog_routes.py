"""HTTP tests for public and admin blog endpoints."""

import pytest

SEEDED_TITLES = [
    "Building Conversational AI with LLaMA and LangChain",
    "My Journey Through GATE 2025: Tips and Strategies",
    "Understanding Retrieval-Augmented Generation (RAG)",
]


class TestPublicBlogs:
    """Anonymous reads."""

    def test_list_published_newest_first(self, client):
        response = client.get("/api/blogs")
        assert response.status_code == 200
        blogs = response.json()
        assert [b["title"] for b in blogs] == SEEDED_TITLES
        assert [b["publishedAt"][:10] for b in blogs] == ["2024-03-10", "2024-02-20", "2024-01-15"]

    def test_blog_json_uses_camel_case(self, client):
        blog = client.get("/api/blogs/slug/understanding-rag").json()
        assert set(blog) == {
            "id",
            "title",
            "slug",
            "content",
            "excerpt",
            "category",
            "tags",
            "publishedAt",
            "readTime",
            "featured",
            "isDraft",
        }
        assert blog["readTime"] == 8
        assert blog["tags"] == ["RAG", "NLP", "AI", "Machine Learning"]

    def test_get_by_id(self, client):
        response = client.get("/api/blogs/1")
        assert response.status_code == 200
        assert response.json()["slug"] == "understanding-rag"

    def test_non_numeric_id_is_bad_request(self, client):
        response = client.get("/api/blogs/abc")
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "blog_id"

    def test_unknown_id_not_found(self, client):
        response = client.get("/api/blogs/999")
        assert response.status_code == 404
        assert response.json()["type"] == "not_found"

    def test_unknown_slug_not_found(self, client):
        assert client.get("/api/blogs/slug/nothing-here").status_code == 404


class TestAdminAuth:
    """Every admin route requires a session."""

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("GET", "/api/admin/blogs"),
            ("GET", "/api/admin/blogs/1"),
            ("POST", "/api/admin/blogs"),
            ("PUT", "/api/admin/blogs/1"),
            ("DELETE", "/api/admin/blogs/1"),
        ],
    )
    def test_rejects_anonymous(self, client, method, path):
        response = client.request(method, path, json={})
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    def test_anonymous_delete_leaves_blog(self, client):
        client.delete("/api/admin/blogs/1")
        assert client.get("/api/blogs/1").status_code == 200


class TestAdminBlogs:
    """Authenticated admin operations."""

    def test_list_all_seeded(self, admin_client):
        response = admin_client.get("/api/admin/blogs")
        assert response.status_code == 200
        blogs = response.json()
        assert [b["title"] for b in blogs] == SEEDED_TITLES
        assert sum(b["featured"] for b in blogs) == 2
        assert not any(b["isDraft"] for b in blogs)

    def test_create_blog(self, admin_client, blog_payload):
        response = admin_client.post("/api/admin/blogs", json=blog_payload)
        assert response.status_code == 201
        blog = response.json()
        assert blog["id"] == 4
        assert blog["slug"] == blog_payload["slug"]
        assert blog["featured"] is False
        assert blog["isDraft"] is False
        assert admin_client.get(f"/api/blogs/{blog['id']}").json() == blog

    def test_new_post_listed_first(self, admin_client, blog_payload):
        admin_client.post("/api/admin/blogs", json=blog_payload)
        assert admin_client.get("/api/blogs").json()[0]["slug"] == blog_payload["slug"]

    def test_create_invalid_payload(self, admin_client, blog_payload):
        del blog_payload["excerpt"]
        blog_payload["readTime"] = "long"
        response = admin_client.post("/api/admin/blogs", json=blog_payload)
        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert {error["field"] for error in body["errors"]} == {"excerpt", "readTime"}
        assert len(admin_client.get("/api/admin/blogs").json()) == 3

    def test_create_duplicate_slug(self, admin_client, blog_payload):
        blog_payload["slug"] = "understanding-rag"
        response = admin_client.post("/api/admin/blogs", json=blog_payload)
        assert response.status_code == 400
        assert response.json()["type"] == "conflict_error"
        assert len(admin_client.get("/api/admin/blogs").json()) == 3

    def test_draft_hidden_from_public(self, admin_client, blog_payload):
        blog_payload["isDraft"] = True
        draft = admin_client.post("/api/admin/blogs", json=blog_payload).json()

        assert admin_client.get(f"/api/admin/blogs/{draft['id']}").status_code == 200
        assert draft["id"] in [b["id"] for b in admin_client.get("/api/admin/blogs").json()]

        admin_client.cookies.clear()
        assert draft["id"] not in [b["id"] for b in admin_client.get("/api/blogs").json()]
        assert admin_client.get(f"/api/blogs/{draft['id']}").status_code == 404
        assert admin_client.get(f"/api/blogs/slug/{draft['slug']}").status_code == 404

    def test_partial_update(self, admin_client):
        before = admin_client.get("/api/blogs/2").json()
        response = admin_client.put("/api/admin/blogs/2", json={"title": "X"})
        assert response.status_code == 200
        after = response.json()
        assert after["title"] == "X"
        assert {k: v for k, v in after.items() if k != "title"} == {k: v for k, v in before.items() if k != "title"}

    def test_update_rejects_null_title(self, admin_client):
        response = admin_client.put("/api/admin/blogs/2", json={"title": None})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    def test_update_slug_conflict(self, admin_client):
        response = admin_client.put("/api/admin/blogs/2", json={"slug": "understanding-rag"})
        assert response.status_code == 400
        assert response.json()["type"] == "conflict_error"
        assert admin_client.get("/api/blogs/2").json()["slug"] == "gate-2025-journey"

    def test_update_missing_blog(self, admin_client):
        assert admin_client.put("/api/admin/blogs/999", json={"title": "X"}).status_code == 404

    def test_delete_blog(self, admin_client):
        response = admin_client.delete("/api/admin/blogs/1")
        assert response.status_code == 204
        assert response.content == b""
        assert admin_client.get("/api/blogs/1").status_code == 404

    def test_delete_missing_blog(self, admin_client):
        assert admin_client.delete("/api/admin/blogs/999").status_code == 404
