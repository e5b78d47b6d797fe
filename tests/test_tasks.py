"""
tests.test_tasks

Task CRUD, reference resolution, partial updates and list filters.
"""

from __future__ import annotations

import httpx


async def _create_task(client: httpx.AsyncClient, headers: dict[str, str], **payload) -> dict:
    body = {"title": "Test Task", "status": "draft", **payload}
    r = await client.post("/api/tasks", headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()


async def _create_label(client: httpx.AsyncClient, headers: dict[str, str], name: str) -> int:
    r = await client.post("/api/labels", headers=headers, json={"name": name})
    assert r.status_code == 201, r.text
    return r.json()["id"]


async def test_create_task_with_all_fields(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    bug = await _create_label(client, user_headers, "bug")
    feature = await _create_label(client, user_headers, "feature")

    task = await _create_task(
        client,
        user_headers,
        title="Full Task",
        content="Test Description",
        index=12,
        status="to_review",
        assignee_id=user["id"],
        taskLabelIds=[feature, bug],
    )
    assert task["id"]
    assert task["title"] == "Full Task"
    assert task["content"] == "Test Description"
    assert task["index"] == 12
    assert task["status"] == "to_review"
    assert task["assignee_id"] == user["id"]
    assert task["taskLabelIds"] == sorted([bug, feature])
    assert task["createdAt"]


async def test_create_task_with_minimal_fields(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    task = await _create_task(client, user_headers)
    assert task["assignee_id"] is None
    assert task["content"] is None
    assert task["index"] is None
    assert task["taskLabelIds"] == []


async def test_create_task_validation(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.post("/api/tasks", headers=user_headers, json={"title": "", "status": "draft"})
    assert r.status_code == 400
    assert "title" in r.json()

    r = await client.post("/api/tasks", headers=user_headers, json={"title": "No status"})
    assert r.status_code == 400
    assert "status" in r.json()


async def test_create_task_with_unknown_references(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.post(
        "/api/tasks", headers=user_headers, json={"title": "T", "status": "nonexistent"}
    )
    assert r.status_code == 404
    assert r.json() == {"error": "TaskStatus not found with slug: nonexistent"}

    r = await client.post(
        "/api/tasks",
        headers=user_headers,
        json={"title": "T", "status": "draft", "assignee_id": 999},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "User not found with id: 999"}

    r = await client.post(
        "/api/tasks",
        headers=user_headers,
        json={"title": "T", "status": "draft", "taskLabelIds": [999]},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Label not found with id: 999"}


async def test_create_with_assignee_zero_is_not_found(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.post(
        "/api/tasks",
        headers=user_headers,
        json={"title": "T", "status": "draft", "assignee_id": 0},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "User not found with id: 0"}


async def test_get_task(client: httpx.AsyncClient, user_headers: dict[str, str]) -> None:
    task = await _create_task(client, user_headers, content="Body")
    r = await client.get(f"/api/tasks/{task['id']}", headers=user_headers)
    assert r.status_code == 200
    assert r.json() == task

    r = await client.get("/api/tasks/999", headers=user_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Task not found with id: 999"}


async def test_update_task_fields(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    task = await _create_task(client, user_headers, content="Old", assignee_id=user["id"])

    r = await client.put(
        f"/api/tasks/{task['id']}",
        headers=user_headers,
        json={"title": "Updated Task", "content": "Updated Description", "index": 99},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Updated Task"
    assert body["content"] == "Updated Description"
    assert body["index"] == 99
    assert body["status"] == "draft"
    assert body["assignee_id"] == user["id"]


async def test_update_task_status_and_assignee(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    task = await _create_task(client, user_headers)
    r = await client.post(
        "/api/users",
        json={"email": "newuser@example.com", "password": "pass123", "firstName": "Jane"},
    )
    new_user_id = r.json()["id"]

    r = await client.put(
        f"/api/tasks/{task['id']}",
        headers=user_headers,
        json={"status": "published", "assignee_id": new_user_id},
    )
    assert r.status_code == 200
    assert r.json()["status"] == "published"
    assert r.json()["assignee_id"] == new_user_id
    assert r.json()["title"] == "Test Task"


async def test_update_can_unassign(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    first = await _create_task(client, user_headers, assignee_id=user["id"])
    second = await _create_task(client, user_headers, assignee_id=user["id"])

    r = await client.put(
        f"/api/tasks/{first['id']}", headers=user_headers, json={"assignee_id": None}
    )
    assert r.json()["assignee_id"] is None

    r = await client.put(f"/api/tasks/{second['id']}", headers=user_headers, json={"assignee_id": 0})
    assert r.json()["assignee_id"] is None


async def test_update_omitting_assignee_keeps_it(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    task = await _create_task(client, user_headers, assignee_id=user["id"])
    r = await client.put(f"/api/tasks/{task['id']}", headers=user_headers, json={"index": 3})
    assert r.json()["assignee_id"] == user["id"]


async def test_update_replaces_and_clears_labels(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    bug = await _create_label(client, user_headers, "bug")
    feature = await _create_label(client, user_headers, "feature")
    task = await _create_task(client, user_headers, taskLabelIds=[bug])

    r = await client.put(
        f"/api/tasks/{task['id']}", headers=user_headers, json={"taskLabelIds": [feature]}
    )
    assert r.json()["taskLabelIds"] == [feature]

    r = await client.put(f"/api/tasks/{task['id']}", headers=user_headers, json={"taskLabelIds": []})
    assert r.json()["taskLabelIds"] == []

    # Label is free again once no task references it.
    r = await client.delete(f"/api/labels/{feature}", headers=user_headers)
    assert r.status_code == 204


async def test_update_with_blank_title_is_bad_request(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    task = await _create_task(client, user_headers)
    r = await client.put(f"/api/tasks/{task['id']}", headers=user_headers, json={"title": " "})
    assert r.status_code == 400


async def test_update_missing_task_is_not_found(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.put("/api/tasks/999", headers=user_headers, json={"title": "X"})
    assert r.status_code == 404


async def test_delete_task(client: httpx.AsyncClient, user_headers: dict[str, str]) -> None:
    label = await _create_label(client, user_headers, "bug")
    task = await _create_task(client, user_headers, taskLabelIds=[label])

    r = await client.delete(f"/api/tasks/{task['id']}", headers=user_headers)
    assert r.status_code == 204

    r = await client.get(f"/api/tasks/{task['id']}", headers=user_headers)
    assert r.status_code == 404

    r = await client.delete(f"/api/tasks/{task['id']}", headers=user_headers)
    assert r.status_code == 404

    r = await client.delete(f"/api/labels/{label}", headers=user_headers)
    assert r.status_code == 204


async def test_list_filters(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    bug = await _create_label(client, user_headers, "bug")
    fix_login = await _create_task(
        client, user_headers, title="Fix login page", assignee_id=user["id"], taskLabelIds=[bug]
    )
    fix_logout = await _create_task(
        client, user_headers, title="Fix logout", status="published", assignee_id=user["id"]
    )
    write_docs = await _create_task(client, user_headers, title="Write docs", taskLabelIds=[bug])

    async def ids(params: dict) -> list[int]:
        r = await client.get("/api/tasks", headers=user_headers, params=params)
        assert r.status_code == 200
        assert r.headers["X-Total-Count"] == str(len(r.json()))
        return [t["id"] for t in r.json()]

    assert await ids({}) == [fix_login["id"], fix_logout["id"], write_docs["id"]]
    assert await ids({"titleCont": "FIX"}) == [fix_login["id"], fix_logout["id"]]
    assert await ids({"assigneeId": user["id"]}) == [fix_login["id"], fix_logout["id"]]
    assert await ids({"status": "published"}) == [fix_logout["id"]]
    assert await ids({"labelId": bug}) == [fix_login["id"], write_docs["id"]]
    assert await ids({"titleCont": "fix", "labelId": bug}) == [fix_login["id"]]
    assert await ids({"titleCont": "fix", "status": "draft", "assigneeId": user["id"]}) == [
        fix_login["id"]
    ]
    assert await ids({"titleCont": "   ", "status": ""}) == [
        fix_login["id"],
        fix_logout["id"],
        write_docs["id"],
    ]
    assert await ids({"titleCont": "nothing matches"}) == []


async def test_title_filter_treats_wildcards_literally(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    await _create_task(client, user_headers, title="Fix login")
    percent = await _create_task(client, user_headers, title="100% done")
    underscore = await _create_task(client, user_headers, title="snake_case names")

    async def titles(query: str) -> list[int]:
        r = await client.get("/api/tasks", headers=user_headers, params={"titleCont": query})
        assert r.status_code == 200
        return [t["id"] for t in r.json()]

    assert await titles("%") == [percent["id"]]
    assert await titles("_") == [underscore["id"]]
    assert await titles("0% D") == [percent["id"]]
