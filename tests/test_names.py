import random

import pytest

from rpgcompanion.names import Gender, NameGenerator, load_names

FEMALE = [f"Female{i}" for i in range(100)]
MALE = [f"Male{i}" for i in range(100)]


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "femaleNames.txt").write_text("\n".join(FEMALE) + "\n", encoding="utf-8")
    (tmp_path / "maleNames.txt").write_text("\n".join(MALE) + "\n", encoding="utf-8")
    return tmp_path


def test_gender_reads_its_own_file(tmp_path):
    (tmp_path / "femaleNames.txt").write_text("\n".join(FEMALE) + "\n", encoding="utf-8")
    generator = NameGenerator(tmp_path)
    names = generator.generate(Gender.FEMALE, 3, random.Random(4))
    assert set(names) <= set(FEMALE)
    with pytest.raises(FileNotFoundError):
        generator.generate(Gender.MALE, 3, random.Random(4))


def test_load_names_round_trip(data_dir):
    assert load_names(data_dir / "femaleNames.txt") == FEMALE


def test_load_names_without_trailing_newline(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Ada\nGrace", encoding="utf-8")
    assert load_names(path) == ["Ada", "Grace"]


def test_female_names_distinct_and_from_list(data_dir):
    names = NameGenerator(data_dir).generate_female_names(5, random.Random(1))
    assert len(names) == 5
    assert len(set(names)) == 5
    assert set(names) <= set(FEMALE)


def test_male_names_from_male_list(data_dir):
    names = NameGenerator(data_dir).generate_male_names(5, random.Random(2))
    assert set(names) <= set(MALE)
    assert len(set(names)) == 5


def test_generate_accepts_gender_string(data_dir):
    names = NameGenerator(data_dir).generate("female", 3, random.Random(3))
    assert set(names) <= set(FEMALE)


def test_same_seed_same_names(data_dir):
    generator = NameGenerator(data_dir)
    first = generator.generate(Gender.MALE, 5, random.Random(42))
    second = generator.generate(Gender.MALE, 5, random.Random(42))
    assert first == second


def test_whole_list_drawn(data_dir):
    names = NameGenerator(data_dir).generate(Gender.FEMALE, 100, random.Random(0))
    assert sorted(names) == sorted(FEMALE)


def test_zero_count(data_dir):
    assert NameGenerator(data_dir).generate(Gender.MALE, 0) == []


def test_too_many_names(data_dir):
    with pytest.raises(ValueError):
        NameGenerator(data_dir).generate(Gender.MALE, 101)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        NameGenerator(tmp_path).generate_female_names(5)


def test_unknown_gender(data_dir):
    with pytest.raises(ValueError):
        NameGenerator(data_dir).generate("other", 1)