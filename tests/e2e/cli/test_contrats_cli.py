"""End-to-end tests for `kaddem contrats` over an in-memory service."""

import datetime
import json

import pytest

from kaddem.domain import Contrat, Etudiant, Specialite

from ...unit.service_layer.fakes import seed

# pylint: disable=redefined-outer-name


@pytest.fixture
def stocked(uow):
    """One student and two contracts, the first assigned to the student."""
    etudiant = Etudiant(last_name="Test", first_name="Student")
    seed(
        uow,
        etudiant,
        Contrat(
            start_date=datetime.date(2025, 1, 1),
            end_date=datetime.date(2025, 6, 30),
            specialty=Specialite.IA,
            etudiant=etudiant,
        ),
        Contrat(
            start_date=datetime.date(2025, 1, 1),
            end_date=datetime.date(2025, 12, 31),
            specialty=Specialite.CLOUD,
        ),
    )
    return uow


class TestListAndShow:
    """`contrats list` and `contrats show`"""

    @staticmethod
    def test_list_lines(invoke, stocked):
        """One line per contract, with its holder when assigned."""
        result = invoke("contrats", "list")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "    1  2025-01-01..2025-06-30  IA        active    Test Student",
            "    2  2025-01-01..2025-12-31  CLOUD     active    -",
        ]

    @staticmethod
    def test_list_json(invoke, stocked):
        """--json prints machine-readable records."""
        result = invoke("contrats", "list", "--json")
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert records[0] == {
            "contrat_id": 1,
            "start_date": "2025-01-01",
            "end_date": "2025-06-30",
            "specialty": "IA",
            "archived": False,
            "etudiant": "Test Student",
        }
        assert records[1]["etudiant"] is None

    @staticmethod
    def test_show(invoke, stocked):
        """A single contract is printed as JSON."""
        result = invoke("contrats", "show", "2")
        assert result.exit_code == 0
        assert json.loads(result.output)["specialty"] == "CLOUD"

    @staticmethod
    def test_show_missing(invoke):
        """An unknown id fails with the lookup error."""
        result = invoke("contrats", "show", "9")
        assert result.exit_code == 1
        assert "Contrat (9) not found" in result.output


class TestAddAndUpdate:
    """`contrats add` and `contrats update`"""

    @staticmethod
    def test_add(invoke, uow):
        """A contract is created from options; the specialty is case-insensitive."""
        result = invoke(
            "contrats", "add", "--start", "2025-09-01", "--end", "2026-06-30",
            "--specialty", "securite",
        )  # fmt: skip
        assert result.exit_code == 0
        assert "Contrat 1 added" in result.output
        assert uow.data.contrats[1].specialty == "SECURITE"
        assert uow.committed

    @staticmethod
    def test_add_inverted_period(invoke, uow):
        """A period ending before it starts is refused."""
        result = invoke(
            "contrats", "add", "--start", "2026-01-01", "--end", "2025-01-01",
            "--specialty", "IA",
        )  # fmt: skip
        assert result.exit_code == 1
        assert "Invalid period" in result.output
        assert uow.data.contrats == {}

    @staticmethod
    def test_add_unknown_specialty(invoke):
        """Only known specialties are accepted."""
        result = invoke(
            "contrats", "add", "--start", "2025-01-01", "--end", "2025-12-31",
            "--specialty", "ASTRONOMY",
        )  # fmt: skip
        assert result.exit_code == 2

    @staticmethod
    def test_update_keeps_other_fields(invoke, stocked):
        """Only the given options change; the holder stays."""
        result = invoke("contrats", "update", "1", "--specialty", "reseaux", "--archived")
        assert result.exit_code == 0
        assert "Contrat 1 updated" in result.output
        record = stocked.data.contrats[1]
        assert record.specialty == "RESEAUX"
        assert record.archived is True
        assert record.end_date == datetime.date(2025, 6, 30)
        assert record.etudiant_id == 1

    @staticmethod
    def test_update_missing(invoke):
        """Updating an unknown id fails."""
        result = invoke("contrats", "update", "3", "--active")
        assert result.exit_code == 1
        assert "Contrat (3) not found" in result.output

    @staticmethod
    def test_update_inverted_period(invoke, stocked):
        """Moving the end before the start is refused and nothing changes."""
        result = invoke("contrats", "update", "1", "--end", "2024-12-31")
        assert result.exit_code == 1
        assert "Invalid period" in result.output
        assert stocked.data.contrats[1].end_date == datetime.date(2025, 6, 30)
        assert not stocked.committed


class TestAffect:
    """`contrats affect`"""

    @staticmethod
    def test_assigns(invoke, stocked):
        """The contract is linked to the named student."""
        result = invoke("contrats", "affect", "2", "Test", "Student")
        assert result.exit_code == 0
        assert "Contrat 2 assigned to Test Student" in result.output
        assert stocked.data.contrats[2].etudiant_id == 1
        assert [r.contrat_id for r in stocked.data.contrats_of(1)] == [1, 2]

    @staticmethod
    def test_unknown_student(invoke, stocked):
        """An unknown student fails and nothing changes."""
        result = invoke("contrats", "affect", "2", "Nobody", "Here")
        assert result.exit_code == 1
        assert "Etudiant (Nobody Here) not found" in result.output
        assert stocked.data.contrats[2].etudiant_id is None


class TestRemove:
    """`contrats remove`"""

    @staticmethod
    def test_with_yes(invoke, stocked):
        """--yes removes without asking."""
        result = invoke("contrats", "remove", "2", "--yes")
        assert result.exit_code == 0
        assert "Contrat 2 removed" in result.output
        assert set(stocked.data.contrats) == {1}

    @staticmethod
    def test_confirmation_declined(invoke, stocked):
        """Answering no aborts and keeps the contract."""
        result = invoke("contrats", "remove", "2", input="n\n")
        assert result.exit_code == 1
        assert "Aborted" in result.output
        assert set(stocked.data.contrats) == {1, 2}

    @staticmethod
    def test_missing(invoke):
        """Removing an unknown id fails."""
        result = invoke("contrats", "remove", "5", "-y")
        assert result.exit_code == 1
        assert "Contrat (5) not found" in result.output


class TestCountAndArchive:
    """`contrats count` and `contrats archive`"""

    @staticmethod
    def test_count(invoke, stocked):
        """Active contracts overlapping the period are counted."""
        result = invoke("contrats", "count", "--start", "2025-07-01", "--end", "2025-07-31")
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    @staticmethod
    def test_count_inverted_period(invoke):
        """An inverted period is refused."""
        result = invoke("contrats", "count", "--start", "2025-08-01", "--end", "2025-07-01")
        assert result.exit_code == 1
        assert "Invalid period" in result.output

    @staticmethod
    def test_archive(invoke, stocked):
        """Expired contracts are archived and listed."""
        result = invoke("contrats", "archive", "--today", "2025-08-01")
        assert result.exit_code == 0
        assert "Archived 1 contrat(s)" in result.output
        assert stocked.data.contrats[1].archived is True
        assert stocked.data.contrats[2].archived is False

    @staticmethod
    def test_archive_nothing(invoke, stocked):
        """Nothing to archive is reported as a warning."""
        result = invoke("contrats", "archive", "--today", "2025-02-01")
        assert result.exit_code == 0
        assert "No expired contracts to archive" in result.output
