from quizapp.model import UserAnswer


def test_list_questions_groups_answers(client, user_headers, question):
    res = client.get("/api/questions", headers=user_headers)
    assert res.status_code == 200
    [q] = res.json()
    assert q["id"] == question.question_id
    assert q["text"] == "2 + 2 = ?"
    assert q["correctAnswer"] == "B"
    assert q["createdBy"] == question.created_by
    assert q["createdAt"] is not None
    assert [(a["label"], a["text"]) for a in q["answers"]] == [("A", "3"), ("B", "4"), ("C", "5")]
    assert all(a["questionId"] == question.question_id for a in q["answers"])


def test_list_questions_ordered_by_id(client, admin_headers, user_headers):
    for text in ("first", "second", "third"):
        client.post("/api/admin/questions", headers=admin_headers, json={
            "questionText": text,
            "correctAnswer": "A",
            "answers": [{"label": "A", "text": "yes"}],
        })
    res = client.get("/api/questions", headers=user_headers)
    ids = [q["id"] for q in res.json()]
    assert ids == sorted(ids)
    assert [q["text"] for q in res.json()] == ["first", "second", "third"]


def test_list_questions_empty(client, user_headers):
    res = client.get("/api/questions", headers=user_headers)
    assert res.status_code == 200
    assert res.json() == []


def test_submit_correct_answer(client, user_headers, question, db, users):
    res = client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": "B"})
    assert res.status_code == 200
    assert res.json() == {"isCorrect": True}

    row = db.query(UserAnswer).one()
    assert row.user_id == users["user"].user_id
    assert row.question_id == question.question_id
    assert row.chosen_answer == "B"
    assert row.is_correct is True


def test_submit_wrong_answer(client, user_headers, question):
    res = client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": "A"})
    assert res.json() == {"isCorrect": False}


def test_submit_is_case_sensitive(client, user_headers, question):
    res = client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": "b"})
    assert res.json() == {"isCorrect": False}


def test_submit_unknown_question(client, user_headers, question, db):
    res = client.post("/api/answers", headers=user_headers, json={"questionId": 9999, "chosenAnswer": "A"})
    assert res.status_code == 404
    assert res.json() == {"error": "Question not found"}
    assert db.query(UserAnswer).count() == 0


def test_repeat_submissions_are_all_recorded(client, user_headers, question, db):
    for choice in ("A", "B"):
        client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": choice})
    assert db.query(UserAnswer).count() == 2


def test_correctness_not_recomputed_after_question_changes(client, user_headers, admin_headers, question):
    client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": "B"})
    client.put(f"/api/admin/questions/{question.question_id}", headers=admin_headers, json={
        "questionText": "2 + 2 = ?",
        "correctAnswer": "A",
        "answers": [{"label": "A", "text": "4"}, {"label": "B", "text": "5"}],
    })
    res = client.get("/api/results", headers=user_headers)
    assert res.json()["correctAnswers"] == 1


def test_results_with_no_answers(client, user_headers):
    res = client.get("/api/results", headers=user_headers)
    assert res.status_code == 200
    assert res.json() == {"totalQuestions": 0, "correctAnswers": 0, "wrongAnswers": 0, "percentage": 0}


def test_results_three_of_four(client, user_headers, question):
    for choice in ("B", "B", "B", "C"):
        client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": choice})
    res = client.get("/api/results", headers=user_headers)
    assert res.json() == {"totalQuestions": 4, "correctAnswers": 3, "wrongAnswers": 1, "percentage": 75.0}


def test_results_rounded_to_two_places(client, user_headers, question):
    for choice in ("B", "A", "A"):
        client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": choice})
    assert client.get("/api/results", headers=user_headers).json()["percentage"] == 33.33


def test_results_are_per_user(client, user_headers, admin_headers, question):
    client.post("/api/answers", headers=admin_headers, json={"questionId": question.question_id, "chosenAnswer": "A"})
    client.post("/api/answers", headers=user_headers, json={"questionId": question.question_id, "chosenAnswer": "B"})
    assert client.get("/api/results", headers=user_headers).json()["percentage"] == 100.0
    assert client.get("/api/results", headers=admin_headers).json()["percentage"] == 0
