# client.py (REST client for the demo service)
import os
import json

import requests

DEMO = os.environ.get("DEMO_BASE_URL", "http://localhost:8080")

def pp(title, r):
    print(f"\n== {title} ==")
    print(json.dumps({"status": r.status_code, "body": r.text}, indent=2))

if __name__ == "__main__":
    # --- CRUD-style endpoints ---
    pp("GET /demo", requests.get(f"{DEMO}/demo", params={"myParam": "hello"}))
    pp("POST /demo", requests.post(f"{DEMO}/demo", data="twelve chars",
                                   headers={"Content-Type": "text/plain"}))
    pp("PUT /demo", requests.put(f"{DEMO}/demo"))
    pp("DELETE /demo", requests.delete(f"{DEMO}/demo"))

    # --- Forwarded to localhostprovider ---
    pp("GET /demo/feign", requests.get(f"{DEMO}/demo/feign", params={"myParam": "hello"}))
