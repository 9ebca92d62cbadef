# ABOUTME: Tests for the resumable record queue file format
# ABOUTME: Covers round trips, empty saves, malformed lines and bracket escaping

import pytest

from lexicon_harvest.core.models import Record
from lexicon_harvest.persistence.queue_store import (
    MalformedLine,
    QueueStore,
    SaveOutcome,
    decode_line,
    encode_record,
)

RECORDS = [
    Record(word="gato", definition="Mamífero doméstico. | Persona astuta.", origin="cattus"),
    Record(word="casa", definition="Edificio para habitar.", origin=""),
    Record(word="año", definition="Período de doce meses.", origin="annus | anus"),
]


@pytest.fixture
def store(tmp_path):
    return QueueStore(tmp_path / "palabras.txt")


class TestFormat:
    def test_encode_record(self):
        record = Record(word="gato", definition="Mamífero doméstico.", origin="cattus")
        assert encode_record(record) == "[gato][Mamífero doméstico.][cattus]"

    def test_empty_origin_is_an_empty_group(self):
        assert encode_record(Record(word="casa", definition="Vivienda.", origin="")) == "[casa][Vivienda.][]"

    def test_decode_trims_fields(self):
        assert decode_line("[ gato ][ Felino. ][ cattus ]") == Record(word="gato", definition="Felino.", origin="cattus")

    def test_extra_groups_are_ignored(self):
        assert decode_line("[gato][Felino.][cattus][sobra]").origin == "cattus"

    def test_closing_bracket_in_field_round_trips(self):
        record = Record(word="nota", definition="Texto [entre corchetes] con \\ barra.", origin="")

        line = encode_record(record)

        assert line.count("\\]") == 1
        assert decode_line(line) == record

    def test_newlines_never_split_a_record(self):
        record = Record(word="gato", definition="Línea uno\nlínea dos.", origin="")
        assert "\n" not in encode_record(record)

    def test_fewer_than_three_groups(self):
        with pytest.raises(MalformedLine) as excinfo:
            decode_line("[casa][Vivienda.]", line_number=4)

        assert excinfo.value.line_number == 4
        assert excinfo.value.line == "[casa][Vivienda.]"


class TestSave:
    def test_writes_one_line_per_record(self, store):
        assert store.save(RECORDS) == SaveOutcome.SAVED

        lines = store.path.read_text(encoding="utf-8").split("\n")
        assert lines == [
            "[gato][Mamífero doméstico. | Persona astuta.][cattus]",
            "[casa][Edificio para habitar.][]",
            "[año][Período de doce meses.][annus | anus]",
        ]

    def test_empty_queue_writes_nothing(self, store):
        assert store.save([]) == SaveOutcome.NOTHING_TO_SAVE
        assert not store.path.exists()

    def test_empty_queue_leaves_existing_file_alone(self, store):
        store.path.write_text("[gato][Felino.][cattus]", encoding="utf-8")

        store.save([])

        assert store.path.read_text(encoding="utf-8") == "[gato][Felino.][cattus]"

    def test_explicit_path_overrides_default(self, store, tmp_path):
        other = tmp_path / "otro.txt"

        store.save(RECORDS[:1], other)

        assert other.exists()
        assert not store.path.exists()

    def test_write_failure_is_raised(self, tmp_path):
        store = QueueStore(tmp_path / "missing-dir" / "palabras.txt")

        with pytest.raises(OSError):
            store.save(RECORDS)


class TestLoad:
    def test_round_trip(self, store):
        store.save(RECORDS)
        assert store.load().records == RECORDS

    def test_malformed_line_is_skipped(self, store):
        store.path.write_text(
            "[gato][Mamífero doméstico.][cattus]\n[casa][Vivienda.]\n[perro][Mamífero cánido.][]\n", encoding="utf-8"
        )

        result = store.load()

        assert [record.word for record in result.records] == ["gato", "perro"]
        assert len(result.malformed) == 1
        assert result.malformed[0].line_number == 2
        assert isinstance(result.malformed[0], MalformedLine)

    def test_blank_lines_are_ignored(self, store):
        store.path.write_text("\n[gato][Felino.][cattus]\n\n   \n", encoding="utf-8")

        result = store.load()

        assert len(result.records) == 1
        assert result.malformed == []

    def test_unicode_line_separators_stay_inside_a_field(self, store):
        records = [Record(word="gato", definition="Felino\x0bdoméstico.", origin="cattus\u2028felis\x1cgato")]

        store.save(records)

        assert store.load().records == records

    def test_carriage_returns_become_spaces(self, store):
        store.save([Record(word="gato", definition="Línea uno\r\nlínea dos.", origin="")])

        result = store.load()

        assert result.records[0].definition == "Línea uno  línea dos."
        assert result.malformed == []

    def test_missing_file(self, store):
        with pytest.raises(FileNotFoundError):
            store.load()

    def test_default_path_comes_from_config(self):
        assert QueueStore().path.name == "palabras.txt"
