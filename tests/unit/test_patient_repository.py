from unittest.mock import MagicMock, patch

import psycopg
import pytest

from letter_worker.database.repositories.patient_repository import PatientRepository
from letter_worker.processor.exceptions import (
    AmbiguousPatientError,
    PatientNotFoundError,
    RegistryError,
)

_GET_CONNECTION = "letter_worker.database.repositories.patient_repository.get_connection"


def _mock_cursor(mock_get_conn: MagicMock) -> MagicMock:
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_cursor


class TestResolve:
    @patch(_GET_CONNECTION)
    def test_returns_patient_id(self, mock_get_conn: MagicMock) -> None:
        cursor = _mock_cursor(mock_get_conn)
        cursor.fetchall.return_value = [("b7a1e7d0-0000-0000-0000-000000000009",)]

        assert PatientRepository().resolve("9434765919") == "b7a1e7d0-0000-0000-0000-000000000009"
        _query, params = cursor.execute.call_args.args
        assert params == ("9434765919",)

    @patch(_GET_CONNECTION)
    def test_raises_not_found(self, mock_get_conn: MagicMock) -> None:
        _mock_cursor(mock_get_conn).fetchall.return_value = []

        with pytest.raises(PatientNotFoundError, match="9434765919"):
            PatientRepository().resolve("9434765919")

    @patch(_GET_CONNECTION)
    def test_raises_ambiguous(self, mock_get_conn: MagicMock) -> None:
        _mock_cursor(mock_get_conn).fetchall.return_value = [("p-1",), ("p-2",)]

        with pytest.raises(AmbiguousPatientError):
            PatientRepository().resolve("9434765919")

    @patch(_GET_CONNECTION)
    def test_wraps_database_errors(self, mock_get_conn: MagicMock) -> None:
        _mock_cursor(mock_get_conn).execute.side_effect = psycopg.OperationalError("down")

        with pytest.raises(RegistryError, match="Failed to query patients"):
            PatientRepository().resolve("9434765919")

    @patch(_GET_CONNECTION)
    def test_never_writes(self, mock_get_conn: MagicMock) -> None:
        cursor = _mock_cursor(mock_get_conn)
        cursor.fetchall.return_value = []

        with pytest.raises(PatientNotFoundError):
            PatientRepository().resolve("9434765919")
        query, _params = cursor.execute.call_args.args
        assert query.lstrip().upper().startswith("SELECT")
        mock_get_conn.return_value.__enter__.return_value.commit.assert_not_called()
