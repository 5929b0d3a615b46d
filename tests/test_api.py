"""End-to-end flows through the HTTP layer."""

import pytest


async def _create_published(client, title="Topic A"):
    created = (await client.post("/api/ama", json={"title": title})).json()
    response = await client.put(f"/api/ama/{created['host_token']}", json={"action": "publish"})
    assert response.status_code == 200
    return created


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_create_returns_tokens_and_links(client):
    response = await client.post("/api/ama", json={"title": "  Topic A ", "description": "desc"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Topic A"
    assert data["is_published"] is False
    tokens = [data["host_token"], data["ask_token"], data["answer_token"], data["digest_token"]]
    assert len(set(tokens)) == 4
    assert data["links"]["ask"].endswith(f"/ask/{data['ask_token']}")


async def test_create_without_title_is_400(client):
    response = await client.post("/api/ama", json={"title": "   "})

    assert response.status_code == 400
    assert response.json()["kind"] == "validation"


async def test_full_scenario(client):
    ama = await _create_published(client)
    ask, host, answer_token = ama["ask_token"], ama["host_token"], ama["answer_token"]

    # ask
    response = await client.post("/api/questions", json={"text": "Why X?", "ask_token": ask})
    assert response.status_code == 200
    question = response.json()
    assert question["vote_count"] == 0
    assert question["is_hidden"] is False
    qid = question["id"]

    # vote, then vote again from the same address
    headers = {"X-Forwarded-For": "1.2.3.4, 10.0.0.1"}
    response = await client.post("/api/votes", json={"question_id": qid, "ask_token": ask}, headers=headers)
    assert response.json() == {"id": qid, "vote_count": 1, "has_voted": True}

    response = await client.post("/api/votes", json={"question_id": qid, "ask_token": ask}, headers=headers)
    assert response.status_code == 409
    assert response.json()["kind"] == "conflict"

    # answer, then answer again
    body = {"question_id": qid, "answer_token": answer_token, "core": "c", "steps": "s", "limits": "l"}
    response = await client.post("/api/answers", json=body)
    assert response.status_code == 200
    assert response.json()["core"] == "c"

    response = await client.post("/api/answers", json=body)
    assert response.status_code == 409

    # host hides the question
    response = await client.put(f"/api/questions/{qid}/hide", json={"host_token": host, "is_hidden": True})
    assert response.json() == {"id": qid, "is_hidden": True}

    ask_view = (await client.get(f"/api/ama/{ask}")).json()
    assert ask_view["questions"] == []
    assert ask_view["permissions"]["can_ask"] is True
    assert ask_view["tokens"] is None

    host_view = (await client.get(f"/api/ama/{host}")).json()
    assert [q["id"] for q in host_view["questions"]] == [qid]
    assert host_view["questions"][0]["vote_count"] == 1
    assert host_view["questions"][0]["answer"]["limits"] == "l"
    assert host_view["permissions"]["is_host"] is True
    assert host_view["tokens"]["ask_token"] == ask
    assert "voter_id" not in str(host_view)


async def test_wrong_token_and_missing_session_look_identical(client):
    ama = await _create_published(client)

    missing = await client.get("/api/ama/no-such-token")
    non_host_publish = await client.put(f"/api/ama/{ama['ask_token']}", json={"action": "publish"})
    non_host_edit = await client.put(f"/api/ama/{ama['digest_token']}", json={"action": "update", "title": "x"})

    for response in (missing, non_host_publish, non_host_edit):
        assert response.status_code == 404
        assert response.json() == missing.json()


async def test_republish_and_edit_after_publish_are_rejected(client):
    ama = await _create_published(client)
    host = ama["host_token"]

    response = await client.put(f"/api/ama/{host}", json={"action": "publish"})
    assert response.status_code == 400
    assert response.json()["kind"] == "state"

    response = await client.put(f"/api/ama/{host}", json={"action": "update", "title": "New"})
    assert response.status_code == 400


async def test_edit_draft(client):
    created = (await client.post("/api/ama", json={"title": "Draft"})).json()

    response = await client.put(
        f"/api/ama/{created['host_token']}",
        json={"action": "update", "title": "Renamed", "description": ""},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Renamed"


async def test_question_on_draft_is_400(client):
    created = (await client.post("/api/ama", json={"title": "Draft"})).json()

    response = await client.post("/api/questions", json={"text": "Early?", "ask_token": created["ask_token"]})
    assert response.status_code == 400
    assert response.json()["kind"] == "state"


async def test_vote_with_wrong_token_is_404(client):
    ama = await _create_published(client)
    qid = (await client.post("/api/questions", json={"text": "Q?", "ask_token": ama["ask_token"]})).json()["id"]

    response = await client.post("/api/votes", json={"question_id": qid, "ask_token": ama["digest_token"]})
    assert response.status_code == 404
    assert response.json()["kind"] == "not_found"


@pytest.mark.parametrize("text", ["", "x" * 141])
async def test_question_length_is_400(client, text):
    ama = await _create_published(client)

    response = await client.post("/api/questions", json={"text": text, "ask_token": ama["ask_token"]})
    assert response.status_code == 400
    assert response.json()["kind"] == "validation"


async def test_digest(client):
    ama = await _create_published(client)
    ask, host = ama["ask_token"], ama["host_token"]

    ids = []
    for text in ("Answered?", "Open?", "Hidden?"):
        ids.append((await client.post("/api/questions", json={"text": text, "ask_token": ask})).json()["id"])
    answered, open_, hidden = ids

    await client.post("/api/votes", json={"question_id": open_, "ask_token": ask}, headers={"X-Real-IP": "5.5.5.5"})
    await client.post(
        "/api/answers",
        json={"question_id": answered, "answer_token": ama["answer_token"], "core": "c", "steps": "s", "limits": "l"},
    )
    await client.put(f"/api/questions/{hidden}/hide", json={"host_token": host, "is_hidden": True})

    digest = (await client.get(f"/api/ama/{ama['digest_token']}/digest")).json()
    assert digest["stats"] == {"total_questions": 2, "total_votes": 1, "answered": 1, "unanswered": 1}
    assert [q["id"] for q in digest["answered"]] == [answered]
    assert [q["id"] for q in digest["unanswered"]] == [open_]
    assert "tokens" not in digest

    preview = (await client.get(f"/api/ama/{host}/digest")).json()
    assert preview["stats"]["total_questions"] == 3

    response = await client.get(f"/api/ama/{ask}/digest")
    assert response.status_code == 404


async def test_digest_of_draft_is_400(client):
    created = (await client.post("/api/ama", json={"title": "Draft"})).json()

    response = await client.get(f"/api/ama/{created['digest_token']}/digest")
    assert response.status_code == 400


async def test_missing_fields_are_rejected_by_schema(client):
    response = await client.post("/api/answers", json={"question_id": 1})
    assert response.status_code == 422
