import unittest

from fastapi.testclient import TestClient

from checkout_api.main import create_app
from tests.fakes import KEY_ID, FakeGateway, make_settings, rejecting_gateway


class TestCreateOrder(unittest.TestCase):
    def setUp(self):
        self.gateway = FakeGateway()
        self.client = TestClient(create_app(settings=make_settings(), gateway=self.gateway))

    def test_converts_rupees_to_paise_and_defaults_currency(self):
        res = self.client.post("/create-order", json={"amount": 499.99})
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["key"], KEY_ID)
        self.assertEqual(body["order"]["id"], "order_TEST123")

        self.assertEqual(len(self.gateway.calls), 1)
        call = self.gateway.calls[0]
        self.assertEqual(call["amount"], 49999)
        self.assertEqual(call["currency"], "INR")
        self.assertTrue(call["receipt"].startswith("receipt_"))
        self.assertEqual(call["notes"], {})

    def test_passes_through_explicit_fields(self):
        res = self.client.post("/create-order", json={
            "amount": "250",
            "currency": "USD",
            "receipt": "rcpt_42",
            "notes": {"source": "storefront"},
        })
        self.assertEqual(res.status_code, 200)
        self.assertEqual(self.gateway.calls[0], {
            "amount": 25000,
            "currency": "USD",
            "receipt": "rcpt_42",
            "notes": {"source": "storefront"},
        })

    def test_invalid_amounts_rejected_before_gateway(self):
        for amount in [0, -5, "abc", "", None, True, "1e999999"]:
            with self.subTest(amount=amount):
                res = self.client.post("/create-order", json={"amount": amount, "currency": "INR"})
                self.assertEqual(res.status_code, 400)
                body = res.json()
                self.assertFalse(body["success"])
                self.assertEqual(body["message"], "Invalid amount")
                self.assertEqual(body["receivedAmount"], amount)
        self.assertEqual(self.gateway.calls, [])

    def test_missing_amount_rejected(self):
        res = self.client.post("/create-order", json={"currency": "INR"})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["message"], "Invalid amount")
        self.assertEqual(self.gateway.calls, [])

    def test_empty_body_rejected(self):
        res = self.client.post("/create-order", json={})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Request body is empty")
        self.assertEqual(self.gateway.calls, [])

    def test_unknown_keys_only_fall_through_to_amount_check(self):
        res = self.client.post("/create-order", json={"price": 10})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["message"], "Invalid amount")
        self.assertEqual(self.gateway.calls, [])

    def test_malformed_body_is_client_error(self):
        res = self.client.post("/create-order", json={"amount": 10, "notes": "not-a-mapping"})
        self.assertEqual(res.status_code, 400)
        self.assertFalse(res.json()["success"])
        self.assertEqual(self.gateway.calls, [])

    def test_missing_credentials_is_configuration_error(self):
        client = TestClient(create_app(settings=make_settings(RAZORPAY_KEY_SECRET=None), gateway=self.gateway))
        res = client.post("/create-order", json={"amount": 100})
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {
            "success": False,
            "message": "Razorpay configuration error",
            "error": "Missing credentials",
        })
        self.assertEqual(self.gateway.calls, [])

    def test_gateway_rejection_reported_as_server_error(self):
        client = TestClient(create_app(settings=make_settings(), gateway=rejecting_gateway()))
        res = client.post("/create-order", json={"amount": 0.5}, headers={"X-Request-ID": "req-1"})
        self.assertEqual(res.status_code, 500)
        body = res.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["message"], "Failed to create order")
        self.assertEqual(body["error"], "The amount must be atleast INR 1.00")
        self.assertEqual(body["debug"]["requestId"], "req-1")
        self.assertIn("timestamp", body["debug"])

    def test_request_id_echoed(self):
        res = self.client.post("/create-order", json={"amount": 1}, headers={"X-Request-ID": "abc"})
        self.assertEqual(res.headers["X-Request-ID"], "abc")


if __name__ == "__main__":
    unittest.main()
