"""Run a quick smoke check against the app in-process.

Creates a student, reads it back and deletes it again using FastAPI's
TestClient, printing each status code. The summary endpoint is skipped
unless `--summary` is passed, since it needs a running generation API.
"""

import argparse
import os
import sys

# Ensure backend folder is on sys.path so `student_service` can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from student_service.main import app


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--summary', action='store_true', help='also call the summary endpoint')
    args = parser.parse_args()

    client = TestClient(app)
    print('HEALTH:', client.get('/health').status_code)
    created = client.post('/students', json={'name': 'Smoke', 'age': 30, 'email': 'smoke@example.com'})
    print('CREATE:', created.status_code, created.json())
    if created.status_code != 201:
        return 1
    sid = created.json()['id']
    print('GET:', client.get(f'/students/{sid}').status_code)
    if args.summary:
        resp = client.get(f'/students/{sid}/summary')
        print('SUMMARY:', resp.status_code, resp.json())
    print('DELETE:', client.delete(f'/students/{sid}').status_code)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
