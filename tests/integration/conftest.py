import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from letter_worker.config.settings import Settings
from letter_worker.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "db" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "letters_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(
    integration_pool: None,
) -> Generator[list[tuple[str, str]], None, None]:
    cleanup: list[tuple[str, str]] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table, row_id in cleanup:
                if table == "letters":
                    cur.execute("DELETE FROM letters WHERE id = %s", (row_id,))
            for table, row_id in cleanup:
                if table == "patients":
                    cur.execute("DELETE FROM patients WHERE id = %s", (row_id,))
        conn.commit()


@pytest.fixture
def seed_letter(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> str:
    s3_key = f"uploads/{uuid.uuid4()}/clinic letter.pdf"
    with db_conn.cursor() as cur:
        cur.execute(
            "INSERT INTO letters (s3_key, file_name) VALUES (%s, %s) RETURNING id",
            (s3_key, "clinic letter.pdf"),
        )
        row = cur.fetchone()
        assert row is not None
    db_conn.commit()
    integration_cleanup.append(("letters", str(row[0])))
    return s3_key


@pytest.fixture
def seed_patient(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> tuple[str, str]:
    nhs_number = str(uuid.uuid4().int)[:10]
    with db_conn.cursor() as cur:
        cur.execute(
            "INSERT INTO patients (nhs_number) VALUES (%s) RETURNING id",
            (nhs_number,),
        )
        row = cur.fetchone()
        assert row is not None
    db_conn.commit()
    patient_id = str(row[0])
    integration_cleanup.append(("patients", patient_id))
    return patient_id, nhs_number
