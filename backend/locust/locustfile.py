"""
Locust Load Test Suite

Tokens are issued by the sign-in service, so pass one or more in via the
environment (comma separated):

  HOTEL_API_TOKENS=tok1,tok2 locust -f locustfile.py --tags list    # GET /hotels
  HOTEL_API_TOKENS=tok1,tok2 locust -f locustfile.py --tags detail  # GET /hotels/{id}
  locust -f locustfile.py --tags edge                               # Auth and bad ids
  HOTEL_API_TOKENS=tok1 locust -f locustfile.py                     # All tests
"""

import os
import random
from locust import HttpUser, task, between, tag, events

TOKENS = [t for t in os.environ.get("HOTEL_API_TOKENS", "").split(",") if t]
HOTEL_IDS = []


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "="*60)
    print(f"SETUP: {len(TOKENS)} token(s) loaded")
    print("="*60)


class HotelReader(HttpUser):
    """
    Eligible users browsing hotels. Every request runs the full gate
    (session lookup, enrollment, ticket) before the hotel query.
    """
    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.headers = {}
        if TOKENS:
            self.headers = {"Authorization": f"Bearer {random.choice(TOKENS)}"}

    @tag("list")
    @task(3)
    def list_hotels(self):
        with self.client.get("/hotels", headers=self.headers, catch_response=True) as resp:
            if resp.status_code == 200:
                if not HOTEL_IDS:
                    HOTEL_IDS.extend(h["id"] for h in resp.json())
                resp.success()
            else:
                resp.failure(f"unexpected status {resp.status_code}")

    @tag("detail")
    @task(5)
    def get_hotel(self):
        if not HOTEL_IDS:
            return
        hotel_id = random.choice(HOTEL_IDS)
        with self.client.get(
            f"/hotels/{hotel_id}",
            headers=self.headers,
            name="/hotels/[id]",
            catch_response=True,
        ) as resp:
            if resp.status_code == 200 and "Rooms" in resp.json():
                resp.success()
            else:
                resp.failure(f"unexpected status {resp.status_code}")


class EdgeCaseUser(HttpUser):
    """Requests that must be rejected cheaply: no token, bad token, bad ids."""
    wait_time = between(0.1, 0.3)

    @tag("edge")
    @task
    def no_token(self):
        with self.client.get("/hotels", catch_response=True) as resp:
            if resp.status_code == 401:
                resp.success()
            else:
                resp.failure(f"expected 401, got {resp.status_code}")

    @tag("edge")
    @task
    def bad_token(self):
        with self.client.get(
            "/hotels",
            headers={"Authorization": "Bearer not-a-token"},
            catch_response=True,
        ) as resp:
            if resp.status_code == 401:
                resp.success()
            else:
                resp.failure(f"expected 401, got {resp.status_code}")

    @tag("edge")
    @task
    def non_numeric_id(self):
        if not TOKENS:
            return
        with self.client.get(
            "/hotels/not-a-number",
            headers={"Authorization": f"Bearer {random.choice(TOKENS)}"},
            name="/hotels/[bad-id]",
            catch_response=True,
        ) as resp:
            if resp.status_code in (402, 404):
                resp.success()
            else:
                resp.failure(f"expected 402/404, got {resp.status_code}")
