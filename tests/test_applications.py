from __future__ import annotations


def test_apply_for_job(client, jobs, user_headers) -> None:
    job_id = jobs[0]["id"]
    r = client.post(f"/users/me/jobs/{job_id}", headers=user_headers)
    assert r.status_code == 201
    assert r.json() == {"applied": job_id}

    mine = client.get("/users/me/jobs", headers=user_headers)
    assert mine.status_code == 200
    assert mine.json() == {"jobs": [job_id]}


def test_apply_twice(client, jobs, user_headers) -> None:
    job_id = jobs[0]["id"]
    assert client.post(f"/users/me/jobs/{job_id}", headers=user_headers).status_code == 201
    r = client.post(f"/users/me/jobs/{job_id}", headers=user_headers)
    assert r.status_code == 400


def test_apply_unknown_job(client, user_headers) -> None:
    assert client.post("/users/me/jobs/0", headers=user_headers).status_code == 404


def test_apply_requires_login(client, jobs) -> None:
    assert client.post(f"/users/me/jobs/{jobs[0]['id']}").status_code == 401


def test_applications_removed_with_job(client, jobs, user_headers, admin_headers) -> None:
    job_id = jobs[0]["id"]
    client.post(f"/users/me/jobs/{job_id}", headers=user_headers)
    assert client.delete(f"/jobs/{job_id}", headers=admin_headers).status_code == 200
    assert client.get("/users/me/jobs", headers=user_headers).json() == {"jobs": []}
