"""
Tests for the catalog seeding script.
"""

import pytest

from scripts.seed_catalog import main, split_full_name


class TestSplitFullName:
    def test_two_words(self):
        assert split_full_name("Isaac Asimov") == ("Isaac", "Asimov")

    def test_compound_last_name(self):
        assert split_full_name("Ursula K. Le Guin") == ("Ursula", "K. Le Guin")

    def test_single_word_rejected(self):
        with pytest.raises(ValueError, match="Expected 'First Last'"):
            split_full_name("Moebius")


class TestMain:
    def test_seeds_defaults(self, tmp_path):
        repo = main(db_path=str(tmp_path / "seed.db"))

        assert len(repo.get_authors_by_ids([1, 2, 3])) == 3
        assert repo.illustrator_exists(3) is True

    def test_adds_extra_people(self, tmp_path):
        repo = main(
            db_path=str(tmp_path / "seed.db"),
            authors=["Ursula Le Guin"],
            illustrators=["Jean Giraud"],
        )

        authors = repo.get_authors_by_ids([4])
        assert [a.full_name for a in authors] == ["Ursula Le Guin"]
        assert repo.illustrator_exists(4) is True

    def test_without_defaults(self, tmp_path):
        repo = main(db_path=str(tmp_path / "seed.db"), seed_defaults=False)

        assert repo.get_authors_by_ids([1]) == []
        assert repo.illustrator_exists(1) is False
