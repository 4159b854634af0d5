# scripts/test/simulate_allocation.py
"""
Drive the capacity rules against a running backend.
Creates a chair stock of 5 on a floor and walks through the allocation scenario:
  zone A reserves 3 → ok; zone B asks 3 → 409 CapacityExceeded (available 2); zone B reserves 2 → ok.
Then places objects in zone A until its reservation is used up.

Usage: python scripts/test/simulate_allocation.py --office 1 --floor 1 --zone-a 1 --zone-b 2
"""

import argparse
import requests

BACKEND_URL = "http://127.0.0.1:8080/api/v1"


def call(method, path, **kwargs):
    resp = requests.request(method, f"{BACKEND_URL}{path}", timeout=10, **kwargs)
    body = resp.json() if resp.content else None
    marker = "✅" if resp.ok else "⛔"
    print(f"{marker} {method} {path} → HTTP {resp.status_code}: {body}")
    return resp


def main():
    parser = argparse.ArgumentParser(description="Simulate allocation and placement requests")
    parser.add_argument("--office", type=int, default=1)
    parser.add_argument("--floor", type=int, default=1)
    parser.add_argument("--zone-a", type=int, default=1)
    parser.add_argument("--zone-b", type=int, default=2)
    parser.add_argument("--item", default="chair")
    parser.add_argument("--count", type=int, default=5)
    args = parser.parse_args()

    floor_path = f"/offices/{args.office}/floors/{args.floor}"

    resp = call("POST", f"{floor_path}/inventory", json={"catalog_id": args.item, "count": args.count})
    if resp.status_code == 409:
        stock = next(s for s in call("GET", f"{floor_path}/inventory").json() if s["catalog_id"] == args.item)
    else:
        resp.raise_for_status()
        stock = resp.json()

    zone_a = f"{floor_path}/zones/{args.zone_a}"
    zone_b = f"{floor_path}/zones/{args.zone_b}"

    alloc_a = call("POST", f"{zone_a}/inventory", json={"floor_stock_id": stock["id"], "quantity": 3})
    call("POST", f"{zone_b}/inventory", json={"floor_stock_id": stock["id"], "quantity": 3})
    call("POST", f"{zone_b}/inventory", json={"floor_stock_id": stock["id"], "quantity": 2})
    call("GET", f"{floor_path}/inventory/{stock['id']}/usage")

    if alloc_a.status_code == 201:
        allocation_id = alloc_a.json()["id"]
        for i in range(4):   # one more than reserved
            call("POST", f"{zone_a}/objects",
                 json={"zone_allocation_id": allocation_id, "x": 1.0 + i, "y": 2.0})
        call("GET", f"{zone_a}/inventory")


if __name__ == "__main__":
    main()
