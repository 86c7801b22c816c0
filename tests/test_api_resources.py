from datetime import date, datetime, time, timedelta, timezone

from gym_api.core import security
from gym_api.db import models


def test_coach_crud_keeps_password_off_the_coach(api_client):
    client, SessionLocal = api_client

    created = client.post(
        "/api/coaches",
        json={
            "name": "Taylor",
            "email": "taylor@gym.local",
            "specialization": "Boxing",
            "password": "coachpass",
        },
    )
    assert created.status_code == 201
    coach = created.json()
    assert "password" not in coach

    db = SessionLocal()
    account = db.query(models.User).filter_by(email="taylor@gym.local").one()
    assert account.role == models.UserRole.coach
    db.close()

    updated = client.put(
        f"/api/coaches/{coach['id']}", json={"experience": 7, "password": "newcoachpass"}
    )
    assert updated.json()["experience"] == 7
    db = SessionLocal()
    account = db.query(models.User).filter_by(email="taylor@gym.local").one()
    assert security.verify_password("newcoachpass", account.password_hash)
    db.close()

    found = client.get("/api/coaches", params={"q": "box"}).json()
    assert [item["id"] for item in found] == [coach["id"]]

    assert client.delete(f"/api/coaches/{coach['id']}").json() == {
        "message": "Coach deleted successfully"
    }
    missing = client.get(f"/api/coaches/{coach['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Coach not found"}


def test_clear_all_coaches(api_client):
    client, _ = api_client
    for name in ("A", "B", "C"):
        client.post("/api/coaches", json={"name": name})

    response = client.delete("/api/coaches/clear-all")

    assert response.json() == {"message": "Deleted 3 coaches successfully"}
    assert client.get("/api/coaches").json() == []


def test_member_crud(api_client):
    client, _ = api_client

    created = client.post(
        "/api/members",
        json={"name": "Morgan", "email": "morgan@gym.local", "membershipType": "Monthly"},
    )
    assert created.status_code == 201
    member = created.json()
    assert member["status"] == "active"
    assert member["expirationDate"] is not None
    assert member["isTrial"] is False

    trial = client.post("/api/members", json={"name": "Pat", "membershipType": "Trial"}).json()
    assert trial["isTrial"] is True

    trials = client.get("/api/members", params={"membershipType": "trial"}).json()
    assert [item["id"] for item in trials] == [trial["id"]]

    updated = client.put(f"/api/members/{member['id']}", json={"phone": "555-0101"})
    assert updated.json()["phone"] == "555-0101"

    assert client.delete(f"/api/members/{member['id']}").json() == {
        "message": "Member deleted successfully"
    }
    missing = client.get(f"/api/members/{member['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Member not found"}


def test_member_past_expiration_is_reported_expired(api_client):
    client, _ = api_client
    past = (datetime.now(timezone.utc) - timedelta(days=3)).isoformat()

    created = client.post(
        "/api/members", json={"name": "Quinn", "membershipType": "Custom", "expirationDate": past}
    ).json()

    assert created["status"] == "expired"
    assert [item["id"] for item in client.get("/api/members", params={"status": "expired"}).json()] == [
        created["id"]
    ]


def test_student_payment_gets_discount(api_client):
    client, _ = api_client
    member = client.post("/api/members", json={"name": "Riley", "membershipType": "Monthly"}).json()

    created = client.post(
        "/api/payments",
        json={
            "memberId": member["id"],
            "amount": 50,
            "paymentMethod": "cash",
            "isStudent": True,
        },
    )

    assert created.status_code == 201
    payment = created.json()
    assert payment["amount"] == 45.0
    assert payment["originalAmount"] == 50.0
    assert payment["memberName"] == "Riley"
    assert payment["membershipType"] == "Monthly"
    assert payment["status"] == "completed"


def test_payment_validation_and_not_found(api_client):
    client, _ = api_client

    invalid = client.post("/api/payments", json={"memberId": "x", "amount": 0})
    missing = client.get("/api/payments/nope")
    missing_delete = client.delete("/api/payments/nope")

    assert invalid.status_code == 400
    assert invalid.json()["error"].startswith("amount")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Payment not found"}
    assert missing_delete.status_code == 404


def test_payment_stats_and_listing(api_client):
    client, _ = api_client
    now = datetime.now(timezone.utc)
    client.post(
        "/api/payments",
        json={"memberId": "m1", "memberName": "Avery", "amount": 100, "paymentDate": now.isoformat()},
    )
    client.post(
        "/api/payments",
        json={
            "memberId": "m2",
            "memberName": "Blake",
            "amount": 40,
            "paymentDate": (now - timedelta(days=400)).isoformat(),
        },
    )

    stats = client.get("/api/payments/stats").json()
    mine = client.get("/api/payments", params={"memberId": "m1"}).json()
    search = client.get("/api/payments", params={"q": "blak"}).json()

    assert stats["totalRevenue"] == 140.0
    assert stats["totalPayments"] == 2
    assert stats["thisMonthRevenue"] == 100.0
    assert stats["todayRevenue"] == 100.0
    assert [item["memberName"] for item in mine] == ["Avery"]
    assert [item["memberName"] for item in search] == ["Blake"]


def test_dashboard_stats_and_revenue(api_client):
    client, SessionLocal = api_client
    client.post("/api/members", json={"name": "Active", "membershipType": "Monthly"})
    client.post(
        "/api/members",
        json={
            "name": "Lapsed",
            "membershipType": "Custom",
            "expirationDate": (datetime.now(timezone.utc) - timedelta(days=1)).isoformat(),
        },
    )
    client.post("/api/coaches", json={"name": "Coach"})
    client.post("/api/payments", json={"memberId": "m1", "amount": 75})
    db = SessionLocal()
    db.add_all(
        [
            models.Schedule(
                class_name="Tomorrow",
                date=date.today() + timedelta(days=2),
                start_time=time(9, 0),
                end_time=time(10, 0),
            ),
            models.Schedule(
                class_name="Last week",
                date=date.today() - timedelta(days=7),
                start_time=time(9, 0),
                end_time=time(10, 0),
            ),
        ]
    )
    db.commit()
    db.close()

    stats = client.get("/api/dashboard/stats").json()
    revenue = client.get("/api/revenue", params={"months": 3}).json()

    assert stats == {
        "totalMembers": 2,
        "activeMembers": 1,
        "totalCoaches": 1,
        "totalRevenue": 75.0,
        "upcomingClasses": 1,
    }
    assert len(revenue["labels"]) == 3
    assert revenue["labels"][-1] == datetime.now(timezone.utc).strftime("%b %Y")
    assert revenue["values"] == [0.0, 0.0, 75.0]


def test_null_name_on_update_keeps_existing_name(api_client):
    client, _ = api_client
    coach = client.post("/api/coaches", json={"name": "Jordan"}).json()
    member = client.post("/api/members", json={"name": "Casey", "membershipType": "Trial"}).json()

    coach_update = client.put(f"/api/coaches/{coach['id']}", json={"name": None, "bio": "Lifts"})
    member_update = client.put(f"/api/members/{member['id']}", json={"name": None, "phone": "555"})

    assert coach_update.status_code == 200
    assert coach_update.json()["name"] == "Jordan"
    assert coach_update.json()["bio"] == "Lifts"
    assert member_update.status_code == 200
    assert member_update.json()["name"] == "Casey"
    assert member_update.json()["phone"] == "555"
