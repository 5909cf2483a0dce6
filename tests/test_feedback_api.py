import pytest


def test_feedback_requires_a_session(client):
    assert client.get("/api/admin/feedback").status_code == 401
    assert client.delete("/api/admin/feedback/1").status_code == 401


def test_feedback_newest_first(admin_client, factory, days_ago):
    factory.feedback(type="bug", message="older", created_at=days_ago(3))
    factory.feedback(type="feature", message="newer", created_at=days_ago(1))

    body = admin_client.get("/api/admin/feedback").json()

    assert body["total"] == 2
    assert body["page"] == 1
    assert [item["message"] for item in body["feedbacks"]] == ["newer", "older"]


@pytest.mark.parametrize("type_filter,expected", [("bug", ["b"]), ("all", ["q", "b"])])
def test_feedback_type_filter(admin_client, factory, days_ago, type_filter, expected):
    factory.feedback(type="bug", message="b", created_at=days_ago(2))
    factory.feedback(type="question", message="q", created_at=days_ago(1))

    body = admin_client.get("/api/admin/feedback", params={"type": type_filter}).json()

    assert [item["message"] for item in body["feedbacks"]] == expected
    assert body["total"] == len(expected)


def test_feedback_rejects_unknown_type(admin_client):
    response = admin_client.get("/api/admin/feedback", params={"type": "spam"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid feedback type"


def test_feedback_pagination(admin_client, factory, days_ago):
    for index in range(3):
        factory.feedback(message=f"m{index}", created_at=days_ago(index))

    body = admin_client.get("/api/admin/feedback", params={"page": 2, "limit": 2}).json()

    assert body["total"] == 3
    assert [item["message"] for item in body["feedbacks"]] == ["m2"]


def test_feedback_author_names(admin_client, factory, days_ago):
    with_profile = factory.user(name="Profile Name")
    without_profile = factory.user()
    factory.feedback(message="a", user_id=with_profile.id, name="Typed", created_at=days_ago(1))
    factory.feedback(message="b", user_id=without_profile.id, name="Typed", created_at=days_ago(2))
    factory.feedback(message="c", created_at=days_ago(3))
    factory.feedback(message="d", name="Visitor", created_at=days_ago(4))

    items = admin_client.get("/api/admin/feedback").json()["feedbacks"]

    assert [(item["message"], item["user_name"]) for item in items] == [
        ("a", "Profile Name"),
        ("b", "Typed"),
        ("c", "Anonymous"),
        ("d", "Visitor"),
    ]
    assert items[0]["user_id"] == str(with_profile.id)
    assert items[2]["user_id"] is None


def test_delete_feedback(admin_client, factory):
    feedback = factory.feedback()

    response = admin_client.delete(f"/api/admin/feedback/{feedback.id}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert admin_client.get("/api/admin/feedback").json()["total"] == 0
    assert admin_client.delete(f"/api/admin/feedback/{feedback.id}").status_code == 404
