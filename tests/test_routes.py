from datetime import date

from habitgrid import schemas


def create(client, **fields):
    data = {"description": "Meditate", "frequency": "daily", "start_date": "2025-01-01", "color": "#40c463"}
    data.update(fields)
    return client.post("/api/habits", data=data)


def test_home_page_empty(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "No habits yet" in response.text
    assert 'name="start_date" value="2025-01-05"' in response.text


def test_create_returns_card(client):
    response = create(client)
    assert response.status_code == 200
    assert "Meditate" in response.text
    assert 'id="habit-1"' in response.text
    assert "Done Today" in response.text


def test_create_escapes_description(client):
    response = create(client, description="<script>alert(1)</script>")
    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_create_weekly_with_days(client):
    response = create(client, frequency="weekly", days_of_week=["1", "3"])
    assert response.status_code == 200
    assert "Mon, Wed" in response.text


def test_create_ignores_blank_day_of_month(client):
    response = create(client, frequency="monthly", days_of_month=[""])
    assert response.status_code == 200


def test_create_rejects_bad_input(client):
    assert create(client, frequency="hourly").status_code == 400
    assert create(client, start_date="01/05/2025").status_code == 400
    assert create(client, days_of_month=["first"]).status_code == 400
    assert create(client, frequency="weekly", days_of_week=["9"]).status_code == 400


def test_list_and_get(client):
    create(client, description="First")
    create(client, description="Second")

    listing = client.get("/api/habits")
    assert listing.status_code == 200
    assert listing.text.index("Second") < listing.text.index("First")

    one = client.get("/api/habits/1")
    assert one.status_code == 200
    assert "First" in one.text


def test_get_missing_is_404(client):
    assert client.get("/api/habits/42").status_code == 404


def test_non_integer_id(client):
    assert client.get("/api/habits/abc").status_code == 422


def test_wrong_method(client):
    assert client.get("/api/habits/1/done-today").status_code == 405


def test_update(client):
    create(client)
    response = client.put(
        "/api/habits/1",
        data={"description": "Read", "frequency": "monthly", "start_date": "2025-02-01",
              "color": "#000000", "days_of_month": ["1", "15"]},
    )
    assert response.status_code == 200
    assert "Read" in response.text
    assert "on day 1, 15" in response.text


def test_update_missing(client):
    response = client.put(
        "/api/habits/5",
        data={"description": "Read", "frequency": "daily", "start_date": "2025-02-01", "color": "#000"},
    )
    assert response.status_code == 404


def test_delete(client):
    create(client)
    response = client.delete("/api/habits/1")
    assert response.status_code == 200
    assert response.text == ""
    assert client.get("/api/habits/1").status_code == 404
    assert client.delete("/api/habits/1").status_code == 404


def test_done_today(client):
    create(client)
    response = client.post("/api/habits/1/done-today")
    assert response.status_code == 200
    assert "Marked as done today" in response.text
    assert "Done Today" not in response.text

    streak = client.get("/api/habits/1/streak")
    assert "1" in streak.text
    assert "day streak" in streak.text
    assert "days streak" not in streak.text


def test_done_today_missing_habit(client):
    assert client.post("/api/habits/3/done-today").status_code == 404


def test_streak_label_plural(client):
    create(client)
    response = client.get("/api/habits/1/streak")
    assert response.status_code == 200
    assert "days streak" in response.text


def test_contribution_window(client, clock):
    create(client)
    client.post("/api/habits/1/done-today")  # 2025-01-05

    response = client.get("/api/habits/1/contribution", params={"from": "2025-01-01", "to": "2025-01-07"})
    assert response.status_code == 200
    assert response.text.count('class="day ') == 7
    assert response.text.count("level-4") == 1
    assert 'title="2025-01-05"' in response.text
    assert response.text.count('class="contribution-week"') == 2


def test_contribution_defaults_on_bad_dates(client):
    create(client)
    response = client.get("/api/habits/1/contribution", params={"from": "invalid", "to": "invalid"})
    assert response.status_code == 200
    assert response.text.count('class="day ') == 366
    # 365 days back from 2025-01-05 crosses Feb 29, 2024
    assert 'title="2024-01-06"' in response.text
    assert 'title="2025-01-05"' in response.text


def test_contribution_at_calendar_edges(client):
    create(client)
    response = client.get("/api/habits/1/contribution", params={"from": "9999-12-25", "to": "9999-12-31"})
    assert response.status_code == 200
    assert response.text.count('class="day ') == 7
    assert 'title="9999-12-31"' in response.text

    response = client.get("/api/habits/1/contribution", params={"from": "0001-01-01", "to": "0001-01-10"})
    assert response.status_code == 200
    assert response.text.count('class="contribution-week"') == 2


def test_contribution_window_too_long(client):
    create(client)
    response = client.get("/api/habits/1/contribution", params={"from": "0001-01-01", "to": "9999-12-31"})
    assert response.status_code == 400


def test_contribution_missing_habit(client):
    assert client.get("/api/habits/9/contribution").status_code == 404


def test_home_page_lists_cards(client):
    create(client, description="Floss")
    client.post("/api/habits/1/done-today")
    response = client.get("/")
    assert "Floss" in response.text
    assert "Done Today" not in response.text


def test_static_assets(client):
    assert client.get("/static/main.js").status_code == 200
    assert client.get("/static/style.css").status_code == 200
