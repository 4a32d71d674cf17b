from bson import ObjectId

PROBLEM = {
    "title": "Reduce warehouse picking time",
    "description": "Our pickers walk too much. Propose a better slotting strategy.",
    "budget": 5000,
    "deadline": "2030-01-01",
}


def test_list_problems_on_empty_store_is_empty(client) -> None:
    response = client.get("/api/problems")

    assert response.status_code == 200
    assert response.json() == []


def test_posted_problem_is_listed_as_open(client) -> None:
    response = client.post("/api/problems", json=PROBLEM)

    assert response.status_code == 200
    assert response.json() == {"message": "Problem posted successfully"}

    problems = client.get("/api/problems").json()
    assert len(problems) == 1
    problem = problems[0]
    assert problem["status"] == "open"
    assert problem["title"] == PROBLEM["title"]
    assert problem["description"] == PROBLEM["description"]
    assert problem["budget"] == 5000
    assert problem["deadline"].startswith("2030-01-01")
    assert ObjectId.is_valid(problem["_id"])
    assert ObjectId.is_valid(problem["hrId"])
    assert "createdAt" in problem


def test_problems_are_listed_newest_first(client) -> None:
    client.post("/api/problems", json={**PROBLEM, "title": "first"})
    client.post("/api/problems", json={**PROBLEM, "title": "second"})
    client.post("/api/problems", json={**PROBLEM, "title": "third"})

    titles = [p["title"] for p in client.get("/api/problems").json()]

    assert titles == ["third", "second", "first"]


def test_closed_problems_are_not_listed(client, mongo_db) -> None:
    client.post("/api/problems", json={**PROBLEM, "title": "still open"})
    mongo_db["problems"].insert_one({**PROBLEM, "title": "closed one", "status": "closed"})

    titles = [p["title"] for p in client.get("/api/problems").json()]

    assert titles == ["still open"]


def test_post_problem_with_invalid_deadline_fails(client, mongo_db) -> None:
    response = client.post("/api/problems", json={**PROBLEM, "deadline": "someday soon"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to post problem"}
    assert mongo_db["problems"].count_documents({}) == 0


def test_post_problem_with_missing_field_fails(client, mongo_db) -> None:
    incomplete = {key: value for key, value in PROBLEM.items() if key != "budget"}

    response = client.post("/api/problems", json=incomplete)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to post problem"}
    assert mongo_db["problems"].count_documents({}) == 0


def test_post_problem_without_caller_gets_unlinked_hr_id(client, register_user) -> None:
    hr_id = register_user("hr@corp.com", role="hr")

    client.post("/api/problems", json=PROBLEM)
    client.post("/api/problems", json=PROBLEM)

    hr_ids = {p["hrId"] for p in client.get("/api/problems").json()}
    assert len(hr_ids) == 2
    assert hr_id not in hr_ids


def test_post_problem_links_hr_caller(client, register_user) -> None:
    hr_id = register_user("hr@corp.com", role="hr")

    client.post("/api/problems", json=PROBLEM, headers={"X-User-Id": hr_id, "X-User-Role": "hr"})

    assert client.get("/api/problems").json()[0]["hrId"] == hr_id


def test_post_problem_does_not_link_student_caller(client, register_user) -> None:
    student_id = register_user("ana@example.edu", role="student")

    response = client.post("/api/problems", json=PROBLEM, headers={"X-User-Id": student_id})

    assert response.status_code == 200
    assert client.get("/api/problems").json()[0]["hrId"] != student_id


def test_list_problems_storage_failure(client, monkeypatch) -> None:
    def broken_list(self):
        raise RuntimeError("cursor killed")

    monkeypatch.setattr("app.services.mongo_service.ProblemService.list_open", broken_list)

    response = client.get("/api/problems")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch problems"}


def test_listed_timestamps_are_utc(client) -> None:
    client.post("/api/problems", json={**PROBLEM, "deadline": "2030-06-30T12:00:00+05:00"})

    problem = client.get("/api/problems").json()[0]

    assert problem["deadline"].startswith("2030-06-30T07:00:00")
    assert problem["deadline"].endswith(("Z", "+00:00"))
    assert problem["createdAt"].endswith(("Z", "+00:00"))


def test_numeric_title_is_stored_as_text(client) -> None:
    response = client.post("/api/problems", json={**PROBLEM, "title": 123})

    assert response.status_code == 200
    assert client.get("/api/problems").json()[0]["title"] == "123"
