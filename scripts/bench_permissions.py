#!/usr/bin/env python3
"""Benchmark permission evaluation: latency (p50, p95, p99) and QPS, cold vs warm role cache.

Usage:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
    export BENCH_USER=... BENCH_PASSWORD=...   # user needs admin.roles to clear the cache
    python scripts/bench_permissions.py [--num-requests 200]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def summarize(label: str, latencies: list[float], errors: int, elapsed: float) -> str:
    n = len(latencies)
    if n == 0:
        return f"{label}: no successful requests (errors={errors})\n"
    ordered = sorted(latencies)
    p50 = statistics.median(ordered) * 1000
    p95 = ordered[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = ordered[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return (
        f"{label} (requests={n}, errors={errors})\n"
        f"  QPS: {n / elapsed:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
    )


def run(client: httpx.Client, api_url: str, headers: dict, num: int, cold: bool) -> str:
    latencies: list[float] = []
    errors = 0
    start = time.perf_counter()
    for _ in range(num):
        if cold:
            client.post(f"{api_url}/v1/roles/cache/clear", headers=headers).raise_for_status()
        t0 = time.perf_counter()
        r = client.get(f"{api_url}/v1/me/permissions", headers=headers)
        elapsed = time.perf_counter() - t0
        if r.status_code == 200:
            latencies.append(elapsed)
        else:
            errors += 1
    total = time.perf_counter() - start
    return summarize("Cold role cache" if cold else "Warm role cache", latencies, errors, total)


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission evaluation")
    parser.add_argument("--num-requests", type=int, default=100, help="Requests per phase")
    parser.add_argument(
        "--output", type=str, default="bench_permissions.txt", help="Output file path"
    )
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "fleet"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "fleetacl-api"),
        os.environ.get("KEYCLOAK_CLIENT_SECRET", ""),
        os.environ.get("BENCH_USER", "testuser"),
        os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    headers = {"Authorization": f"Bearer {token}"}

    with httpx.Client(timeout=30.0) as client:
        summary = run(client, api_url, headers, args.num_requests, cold=True)
        summary += run(client, api_url, headers, args.num_requests, cold=False)
    print(summary)

    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
