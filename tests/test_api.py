"""Tests for HTTP endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from nutrient_swap.api.app import create_app


def _log_meal(client: TestClient) -> dict[str, object]:
    response = client.post(
        "/meals",
        json={
            "profile_id": str(uuid4()),
            "ingredients": ["beef", "rice"],
            "quantities": [200, 100],
            "meal_type": "dinner",
            "logged_on": "2024-03-14",
        },
    )
    assert response.status_code == 201
    return response.json()


def _recommend(client: TestClient, meal_id: str) -> list[dict[str, object]]:
    response = client.post(
        "/swaps/recommendations",
        json={
            "meal_id": meal_id,
            "goals": [{"nutrient": "calories", "direction": "decrease"}],
        },
    )
    assert response.status_code == 200
    return response.json()["swaps"]


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ingredient_search(container) -> None:
    client = TestClient(create_app(container))

    by_query = client.get("/ingredients", params={"query": "rice", "limit": 2})
    by_group = client.get("/ingredients", params={"group": "Beverages"})

    assert by_query.json() == {"ingredients": ["rice", "brown rice"]}
    assert by_group.json() == {"ingredients": ["coffee, brewed"]}


def test_ingredient_detail(container) -> None:
    client = TestClient(create_app(container))

    known = client.get("/ingredients/blue cheese").json()
    unknown = client.get("/ingredients/xyzzy").json()

    assert known["matched_key"] == "blue cheese"
    assert known["food_id"] == 1
    assert known["nutrients"]["calories"] == 353
    assert unknown["matched_key"] is None
    assert unknown["nutrients"]["calories"] == 50


def test_food_groups_and_goals(container) -> None:
    client = TestClient(create_app(container))

    groups = client.get("/food-groups").json()
    goals = client.get("/goals").json()["goals"]

    assert groups["food_groups"][0] == "Beverages"
    assert len(goals) == 12
    assert goals[0] == {
        "goal_type": "decrease_calories",
        "description": (
            "Decreases calorie content while maintaining nutritional balance"
        ),
    }


def test_log_and_fetch_meal(container) -> None:
    client = TestClient(create_app(container))

    meal = _log_meal(client)
    fetched = client.get(f"/meals/{meal['id']}")

    assert meal["nutrients"]["calories"] == 630
    assert fetched.status_code == 200
    assert fetched.json() == meal
    assert client.get(f"/meals/{uuid4()}").status_code == 404


def test_log_meal_rejects_mismatched_lengths(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals",
        json={
            "profile_id": str(uuid4()),
            "ingredients": ["beef", "rice"],
            "quantities": [200],
        },
    )

    assert response.status_code == 422


def test_recommendations(container) -> None:
    client = TestClient(create_app(container))
    meal = _log_meal(client)

    swaps = _recommend(client, meal["id"])

    assert swaps[0]["original_food"] == "beef"
    assert swaps[0]["replacement_food"] == "tofu"
    assert swaps[0]["impact_score"] == 1.0
    assert swaps[0]["summary"].startswith("Replace beef with tofu")
    assert len(swaps) == 5


def test_recommendations_errors(container) -> None:
    client = TestClient(create_app(container))

    unknown_meal = client.post(
        "/swaps/recommendations",
        json={
            "meal_id": str(uuid4()),
            "goals": [{"nutrient": "fat", "direction": "decrease"}],
        },
    )
    bad_goal = client.post(
        "/swaps/recommendations",
        json={
            "meal_id": str(uuid4()),
            "goals": [{"nutrient": "vitamin c", "direction": "decrease"}],
        },
    )

    assert unknown_meal.status_code == 404
    assert bad_goal.status_code == 422


def test_preview_then_apply(container) -> None:
    client = TestClient(create_app(container))
    meal = _log_meal(client)
    swap = _recommend(client, meal["id"])[0]

    preview = client.post("/swaps/preview", json={"meal_id": meal["id"], "swap": swap})

    assert preview.status_code == 200
    assert preview.json()["meal"]["ingredients"] == ["tofu", "rice"]
    assert preview.json()["meal"]["nutrients"]["calories"] == 456
    assert client.get(f"/meals/{meal['id']}").json()["ingredients"] == [
        "beef",
        "rice",
    ]

    applied = client.post("/swaps/apply", json={"meal_id": meal["id"], "swap": swap})

    body = applied.json()
    assert applied.status_code == 200
    assert body["swap"]["history_id"] is not None
    assert body["nutrient_changes"][0]["calories"] == -174
    assert client.get(f"/meals/{meal['id']}").json()["ingredients"] == [
        "tofu",
        "rice",
    ]

    history = client.get(
        "/swaps/history", params={"start": "2024-03-31", "end": "2024-03-01"}
    ).json()
    assert history["start"] == "2024-03-01"
    assert [item["replacement_food"] for item in history["swaps"]] == ["tofu"]


def test_apply_errors(container) -> None:
    client = TestClient(create_app(container))
    meal = _log_meal(client)
    swap = _recommend(client, meal["id"])[0]

    same_food = dict(swap, replacement_food="beef")
    unmatched = dict(swap, original_food="salmon", replacement_food="tofu")

    invalid = client.post(
        "/swaps/apply", json={"meal_id": meal["id"], "swap": same_food}
    )
    missing = client.post(
        "/swaps/apply", json={"meal_id": meal["id"], "swap": unmatched}
    )
    unknown = client.post("/swaps/apply", json={"meal_id": str(uuid4()), "swap": swap})

    assert invalid.status_code == 400
    assert missing.status_code == 400
    assert unknown.status_code == 404


def test_recommendations_clamp_goal_values(container) -> None:
    client = TestClient(create_app(container))
    meal = _log_meal(client)

    response = client.post(
        "/swaps/recommendations",
        json={
            "meal_id": meal["id"],
            "goals": [
                {
                    "nutrient": "protein",
                    "direction": "increase",
                    "intensity": 1.5,
                    "target_delta": -10,
                }
            ],
        },
    )

    assert response.status_code == 200
    assert response.json()["swaps"]
