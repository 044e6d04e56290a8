"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags concurrency  # Parallel booking creation
  locust -f locustfile.py --tags throughput   # Public catalogue reads
  locust -f locustfile.py --tags edge         # Test bad input
  locust -f locustfile.py                     # All tests
"""

import random
import string
from datetime import date, timedelta

from locust import HttpUser, between, events, tag, task

# Shared state
HOST_IDS = []
DESTINATION_IDS = ["shimla", "goa", "kerala", "rajasthan", "ladakh", "varanasi", "munnar"]
PASSWORD = "test12345"


def random_email():
    return f"load_{random.randint(10000, 99999)}_{random.randint(0, 999)}@test.com"


def random_name():
    return "u_" + "".join(random.choices(string.ascii_lowercase, k=8))


def booking_body(host_id):
    start = date.today() + timedelta(days=random.randint(1, 120))
    return {
        "title": f"Trip {random.randint(1, 10000)}",
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(days=random.randint(1, 7))).isoformat(),
        "guests": str(random.randint(1, 4)),
        "price": str(random.randint(5, 50) * 1000),
        "hostId": host_id,
    }


def register(client, role="traveler"):
    """Register a fresh account. The session cookie lands in the client's jar."""
    resp = client.post("/api/register", json={
        "name": random_name(),
        "email": random_email(),
        "password": PASSWORD,
        "role": role,
    })
    return resp.json() if resp.status_code == 201 else None


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "=" * 60)
    print("SETUP: hosts register on first spawn; travelers book against them")
    print("=" * 60)


class ConcurrencyUser(HttpUser):
    """
    TEST 1: Concurrency - many travelers creating bookings at once

    Run: locust -f locustfile.py --tags concurrency -u 100 -r 50 --run-time 30s

    After test, verify no id was handed out twice:
      jq '[.[].id] | length == (unique | length)' data/bookings.json
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        if len(HOST_IDS) < 3:
            host = register(self.client, role="host")
            if host:
                HOST_IDS.append(host["id"])
                print(f"\n✓ Registered host {host['id']}\n")
            self.client.post("/api/logout")
        self.user = register(self.client)

    @tag("concurrency")
    @task
    def create_booking(self):
        if not HOST_IDS or not self.user:
            return

        with self.client.post("/api/bookings",
            json=booking_body(random.choice(HOST_IDS)),
            catch_response=True
        ) as resp:
            if resp.status_code == 201:
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class ThroughputUser(HttpUser):
    """
    TEST 2: Throughput - public catalogue

    Run: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s

    Compare:
      - Avg response time
      - Requests/sec
      - P95/P99 latency
    """
    wait_time = between(0.1, 0.5)

    @tag("throughput", "read")
    @task(10)
    def list_destinations(self):
        self.client.get("/api/destinations")

    @tag("throughput", "read")
    @task(5)
    def get_destination(self):
        destination_id = random.choice(DESTINATION_IDS)
        self.client.get(f"/api/destinations/{destination_id}",
            name="/api/destinations/{id}")

    @tag("throughput", "read")
    @task(5)
    def list_packages(self):
        self.client.get(f"/api/packages?destinationId={random.choice(DESTINATION_IDS)}",
            name="/api/packages?destinationId=[id]")

    @tag("throughput", "read")
    @task(3)
    def list_posts(self):
        self.client.get("/api/posts")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def on_start(self):
        self.user = register(self.client)

    def _expect(self, resp, codes):
        if resp.status_code in codes:
            resp.success()
        else:
            resp.failure(f"Expected {codes}, got {resp.status_code}")

    @tag("edge")
    @task
    def missing_host(self):
        body = booking_body(0)
        with self.client.post("/api/bookings", json=body, catch_response=True) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def missing_title(self):
        body = booking_body(1)
        del body["title"]
        with self.client.post("/api/bookings", json=body, catch_response=True) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def traveler_updates_status(self):
        with self.client.patch("/api/bookings/1/status",
            json={"status": "confirmed"},
            catch_response=True
        ) as resp:
            self._expect(resp, [403])

    @tag("edge")
    @task
    def traveler_reads_revenue(self):
        with self.client.get("/api/admin/revenue", catch_response=True) as resp:
            self._expect(resp, [403])

    @tag("edge")
    @task
    def malformed_json(self):
        with self.client.post("/api/bookings",
            data="not json at all",
            headers={"Content-Type": "application/json"},
            catch_response=True
        ) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def unknown_booking(self):
        with self.client.delete("/api/bookings/999999",
            name="/api/bookings/[missing]",
            catch_response=True
        ) as resp:
            self._expect(resp, [404])


class RealisticUser(HttpUser):
    """
    TEST 4: Realistic mixed workload

    Run: locust -f locustfile.py -u 200 -r 20 --run-time 120s

    Simulates real traffic:
      - Mostly browsing destinations and posts
      - Some bookings
      - Checking one's own bookings
    """
    wait_time = between(1, 3)

    def on_start(self):
        self.user = register(self.client)

    @task(50)
    def browse(self):
        self.client.get("/api/destinations")

    @task(15)
    def read_posts(self):
        self.client.get("/api/posts")

    @task(10)
    def my_bookings(self):
        if self.user:
            self.client.get("/api/bookings")

    @task(5)
    def book(self):
        if self.user:
            resp = self.client.get("/api/hosts")
            if resp.status_code == 200 and resp.json():
                host_id = random.choice(resp.json())["id"]
                self.client.post("/api/bookings", json=booking_body(host_id))
