"""Tests for the Scout model."""

import pytest

from talentscout.core.models import Scout, ScoutSkill, ScoutSpecialization


class TestScout:

    def test_default_skills(self):
        scout = Scout(name="Pat Keane")
        assert all(scout.skill(s) == 10 for s in ScoutSkill)

    def test_data_literacy_shortcut(self, scout_factory):
        scout = scout_factory(data_literacy=17)
        assert scout.data_literacy == 17

    def test_skill_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="data_literacy"):
            Scout(skills={ScoutSkill.DATA_LITERACY: 21})

    def test_partial_skills_default_to_ten(self):
        """Skills left out of the map read as 10."""
        scout = Scout(skills={ScoutSkill.TECHNICAL_EYE: 16})
        assert scout.skill(ScoutSkill.TECHNICAL_EYE) == 16
        assert scout.skill(ScoutSkill.PHYSICAL_ASSESSMENT) == 10

    def test_from_dict(self):
        scout = Scout.from_dict({
            "id": "s-9",
            "name": "Ines Moreau",
            "specialization": "youth",
            "skills": {"psychological_read": 15},
        })
        assert scout.specialization == ScoutSpecialization.YOUTH
        assert scout.skill(ScoutSkill.PSYCHOLOGICAL_READ) == 15
        assert scout.skill(ScoutSkill.DATA_LITERACY) == 10
