#!/usr/bin/env python
import os
import subprocess
import sys
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent

# Skipped when DEV_ADMIN_PASSWORD is unset.
ENSURE_DEV_ADMIN = (
    "from django.conf import settings; "
    "from core.storage import storage; "
    "settings.DEV_ADMIN_PASSWORD and storage.ensure_superuser("
    "username=settings.DEV_ADMIN_USERNAME, "
    "email=settings.DEV_ADMIN_EMAIL, "
    "password=settings.DEV_ADMIN_PASSWORD)"
)


def run(command: list[str]) -> None:
    subprocess.check_call(command, cwd=BASE_DIR)


def main() -> None:
    run([sys.executable, "manage.py", "migrate"])
    run([sys.executable, "manage.py", "shell", "-c", ENSURE_DEV_ADMIN])
    run([sys.executable, "manage.py", "runserver", os.getenv("BIND_ADDRESS", "0.0.0.0:8000")])


if __name__ == "__main__":
    main()
