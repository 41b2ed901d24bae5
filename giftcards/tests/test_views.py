import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from giftcards.models import Location


REDEEM_URL = "/api/v1/giftcards/redeem/"
ORDERS_URL = "/api/v1/giftcards/orders/"
ADMIN_CARDS_URL = "/api/v1/admin/giftcards/"
ADMIN_PROMOTIONS_URL = "/api/v1/admin/promotions/"
ADMIN_ANNOUNCEMENTS_URL = "/api/v1/admin/announcements/"


@pytest.fixture
def client():
    return APIClient()


def create_paid_card(client, amount="25.00", usage_limit=1):
    card = client.post(ADMIN_CARDS_URL, {"name": "Team", "amount": amount, "usage_limit": usage_limit}).json()["data"]
    client.post(f"{ADMIN_CARDS_URL}{card['id']}/toggle-paid/")
    return card


def redeem(client, code):
    response = client.post(REDEEM_URL, {"code": code})
    assert response.status_code == 200
    return response.json()["data"]


class TestRedeemCodeView:

    def test_redeem_card_once(self, client):
        card = create_paid_card(client)

        data = redeem(client, card["code"].lower())
        assert data["success"] is True
        assert data["amount"] == "25.00"
        assert data["balance"] == "25.00"

        again = redeem(client, card["code"])
        assert again["success"] is False
        assert again["message"] == "This gift card has reached its usage limit."
        assert again["balance"] == "25.00"

    def test_envelope_message_is_result_message(self, client):
        response = client.post(REDEEM_URL, {"code": "UNKNOWN"})
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Invalid code. Not found."
        assert body["data"]["success"] is False

    def test_blank_code_rejected_and_not_counted(self, client):
        for _ in range(3):
            response = client.post(REDEEM_URL, {"code": "   "})
            assert response.status_code == 400
            assert response.json()["message"] == "code: Please enter a gift card code."

        dashboard = client.get("/api/v1/admin/dashboard/").json()["data"]
        assert dashboard["failed_attempts"] == 0
        assert dashboard["total_threats"] == 0

    def test_three_invalid_codes_lock_the_app(self, client):
        results = [redeem(client, f"BAD{i}") for i in range(3)]
        assert [r["alert"] for r in results] == [False, False, True]
        assert results[-1]["is_locked"] is True

        threats = client.get("/api/v1/admin/security/threats/").json()["data"]
        assert len(threats) == 1
        assert threats[0]["reason"] == "3 failed redemption attempts."
        # loopback clients have no resolvable location
        assert threats[0]["location"] is None
        assert threats[0]["location_display"] == "N/A"

    def test_locked_rejects_valid_code_without_counting(self, client):
        card = create_paid_card(client)
        for i in range(3):
            redeem(client, f"BAD{i}")

        data = redeem(client, card["code"])
        assert data["success"] is False
        assert data["message"] == "Application is temporarily locked."
        assert client.get("/api/v1/admin/dashboard/").json()["data"]["failed_attempts"] == 0

        client.post("/api/v1/admin/security/unlock/")
        assert redeem(client, card["code"])["success"] is True

    def test_threat_location_from_client_ip(self, client, monkeypatch):
        import giftcards.views as views

        monkeypatch.setattr(views, "get_client_ip", lambda request: ("203.0.113.10", True))
        monkeypatch.setattr(views, "lookup_location", lambda ip: Location(latitude=40.7128, longitude=-74.006))

        for i in range(3):
            redeem(client, f"BAD{i}")

        threats = client.get("/api/v1/admin/security/threats/").json()["data"]
        assert len(threats) == 1
        assert threats[0]["location"] == {"latitude": 40.7128, "longitude": -74.006}
        assert threats[0]["location_display"] == "40.7128, -74.0060"

    def test_promotion_redeemed_twice(self, client):
        promo = client.post(ADMIN_PROMOTIONS_URL, {"name": "Welcome", "amount": "5.00"}).json()["data"]
        client.post(f"{ADMIN_PROMOTIONS_URL}{promo['id']}/toggle-active/")

        assert redeem(client, promo["code"])["success"] is True
        assert redeem(client, promo["code"])["balance"] == "10.00"

    def test_sessions_are_isolated(self, client):
        card = create_paid_card(client)
        other = APIClient()
        data = redeem(other, card["code"])
        assert data["message"] == "Invalid code. Not found."


class TestOrdersView:

    def order_payload(self, **overrides):
        payload = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "amount": "40.00",
            "delivery_date": (timezone.now() + timedelta(days=3)).date().isoformat(),
        }
        payload.update(overrides)
        return payload

    def test_place_order(self, client):
        response = client.post(ORDERS_URL, self.order_payload())
        assert response.status_code == 201

        order = response.json()["data"]
        assert order["name"] == "For Ada Lovelace"
        assert order["status"] == "Unpaid"
        assert order["is_paid"] is False
        assert len(order["code"]) == 10
        assert order["qr_code_url"].endswith(f"data={order['code']}")

        orders = client.get(ORDERS_URL).json()["data"]
        assert [o["id"] for o in orders] == [order["id"]]

    def test_order_validation(self, client):
        response = client.post(ORDERS_URL, self.order_payload(amount="0", email="not-an-email"))
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "amount" in errors
        assert "email" in errors

    @pytest.mark.parametrize("amount", ["0.50", "0.99"])
    def test_order_minimum_is_one_dollar(self, client, amount):
        response = client.post(ORDERS_URL, self.order_payload(amount=amount))
        assert response.status_code == 400
        assert "amount" in response.json()["errors"]

        assert client.post(ORDERS_URL, self.order_payload(amount="1.00")).status_code == 201

    def test_past_delivery_date_rejected(self, client):
        past = (timezone.now() - timedelta(days=30)).date().isoformat()
        response = client.post(ORDERS_URL, self.order_payload(delivery_date=past))
        assert response.status_code == 400
        assert response.json()["errors"]["delivery_date"] == ["The delivery date cannot be in the past."]
        assert client.get(ORDERS_URL).json()["data"] == []

    def test_delivery_today_accepted(self, client):
        today = timezone.localdate().isoformat()
        response = client.post(ORDERS_URL, self.order_payload(delivery_date=today))
        assert response.status_code == 201

    def test_paid_order_notification_delivered_once(self, client):
        order = client.post(ORDERS_URL, self.order_payload()).json()["data"]
        client.post(f"{ADMIN_CARDS_URL}{order['id']}/toggle-paid/")

        notifications = client.get("/api/v1/giftcards/notifications/").json()["data"]
        assert [n["message"] for n in notifications] == ["Your gift card for $40.00 is now active!"]
        assert client.get("/api/v1/giftcards/notifications/").json()["data"] == []

    def test_unpaid_order_counts_as_failed_attempt(self, client):
        order = client.post(ORDERS_URL, self.order_payload()).json()["data"]
        data = redeem(client, order["code"])
        assert data["message"] == "This gift card has not been activated yet."
        assert data["balance"] == "0.00"
        assert client.get("/api/v1/admin/dashboard/").json()["data"]["failed_attempts"] == 1


class TestAnnouncements:

    def create_announcement(self, client, activate=True, **overrides):
        payload = {"title": "Maintenance", "message": "Downtime tonight", "category": "warning"}
        payload.update(overrides)
        anno = client.post(ADMIN_ANNOUNCEMENTS_URL, payload).json()["data"]
        if activate:
            client.post(f"{ADMIN_ANNOUNCEMENTS_URL}{anno['id']}/toggle-active/")
        return anno

    def test_only_active_announcements_visible(self, client):
        visible = self.create_announcement(client)
        self.create_announcement(client, activate=False, title="Draft")

        data = client.get("/api/v1/giftcards/announcements/").json()["data"]
        assert [a["id"] for a in data] == [visible["id"]]
        assert data[0]["countdown"] is None

    def test_dismiss_is_per_session(self, client):
        anno = self.create_announcement(client)
        response = client.post(f"/api/v1/giftcards/announcements/{anno['id']}/dismiss/")
        assert response.status_code == 200

        assert client.get("/api/v1/giftcards/announcements/").json()["data"] == []
        admin_view = client.get(f"{ADMIN_ANNOUNCEMENTS_URL}{anno['id']}/").json()["data"]
        assert admin_view["is_active"] is True

    def test_dismiss_unknown(self, client):
        response = client.post("/api/v1/giftcards/announcements/6f1c1d7e-0000-4000-8000-000000000000/dismiss/")
        assert response.status_code == 404

    def test_countdown_for_expiring_announcement(self, client):
        expiry = (timezone.now() + timedelta(days=2, hours=1)).isoformat()
        self.create_announcement(client, has_expiration=True, expiry_date=expiry)

        data = client.get("/api/v1/giftcards/").json()["data"]
        assert data["announcements"][0]["countdown"].startswith("Expires in: 2d")
        assert data["balance"] == "0.00"
        assert data["is_locked"] is False
