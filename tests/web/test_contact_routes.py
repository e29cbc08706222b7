"""HTTP tests for the contact form and health endpoints."""


def test_contact_message_accepted(client):
    response = client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ada@analytical-engine.org", "subject": "Hello", "message": "Loved the RAG post."},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully", "success": True}


def test_contact_message_invalid(client):
    response = client.post("/api/contact", json={"name": "", "email": "not-an-email", "subject": "Hi"})
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"name", "email", "message"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
