from locust import HttpUser, task, between
import random

# Queries covering each search branch
QUERIES = [
    "tx_abc123",
    "a" * 64,
    "addr_test1qz2fxv2umyhttkxyxp8x0dlpdt3k6cwng5pxj3jhsydzer3jcu5d8ps7zex2k2xt3uqxgjqnnj83ws8lhrn648jjxtwq2ytjqp",
    "8945234",
]


class DashboardUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def analytics(self):
        self.client.get("/api/analytics")

    @task(2)
    def feeds(self):
        self.client.get("/api/transactions")
        self.client.get("/api/contributions")

    @task
    def search(self):
        self.client.get("/search", params={"q": random.choice(QUERIES)}, name="/search")
