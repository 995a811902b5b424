"""
Tests for weighted scoring and the context bonus.
"""

import pytest

from resume_analyzer.scoring.calculator import calculate_score, round_half_up
from resume_analyzer.scoring.catalog import RoleKeywordSet, get_keywords_for_role

FULL_STACK = get_keywords_for_role("Full Stack Developer")


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(12.5, 13), (0.5, 1), (31.5, 32), (12.49, 12), (0, 0)])
    def test_rounds_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestCalculateScore:
    def test_three_keywords_without_sections(self):
        """
        Three of twenty technical keywords give technicalScore 15 and base 12.
        Without headers every section is the full text, so each keyword earns
        3 + 2 + 1.5 bonus.
        """
        result = calculate_score("JavaScript React Node.js", FULL_STACK)

        assert result.technical_score == 15
        assert result.soft_score == 0
        assert result.base_score == 12
        assert result.context_bonus == 19.5
        assert result.final_score == 32
        assert result.matched_technical == ("JavaScript", "React", "Node.js")

    def test_strict_sections_award_no_bonus_without_headers(self):
        result = calculate_score("JavaScript React Node.js", FULL_STACK, strict_sections=True)
        assert result.context_bonus == 0
        assert result.final_score == 12

    def test_variant_match_gets_no_context_bonus(self):
        """The bonus checks the literal keyword, so 'nodejs' scores but earns no bonus."""
        result = calculate_score("nodejs", FULL_STACK)
        assert result.matched_technical == ("Node.js",)
        assert result.base_score == 4
        assert result.context_bonus == 0
        assert result.final_score == 4

    def test_section_bonuses(self):
        text = "Experience\nBuilt React apps with Docker\nSkills\nReact, Docker, Git\n"
        result = calculate_score(text, FULL_STACK)

        assert result.matched_technical == ("React", "Git", "Docker")
        assert result.base_score == 12
        # React, Docker: 3 + 2 + 1.5 each; Git: projects (full text) + skills
        assert result.context_bonus == 16.5
        assert result.final_score == 29

    def test_strict_sections_skip_only_missing_sections(self):
        text = "Experience\nBuilt React apps with Docker\nSkills\nReact, Docker, Git\n"
        result = calculate_score(text, FULL_STACK, strict_sections=True)
        assert result.context_bonus == 10.5
        assert result.final_score == 23

    def test_soft_skill_bonus_from_experience(self):
        result = calculate_score("Experience\nLeadership of a team\n", FULL_STACK)
        assert result.matched_soft == ("Leadership",)
        assert result.soft_score == 20
        assert result.base_score == 4
        assert result.context_bonus == 1
        assert result.final_score == 5

    def test_bonus_and_score_are_capped(self):
        text = "Experience\n" + " ".join([*FULL_STACK.technical, *FULL_STACK.soft])
        result = calculate_score(text, FULL_STACK)

        assert result.technical_score == 100
        assert result.soft_score == 100
        assert result.context_bonus == 25
        assert result.final_score == 100
        assert result.match_percentage == 100

    def test_empty_keyword_lists(self):
        result = calculate_score("Python developer", RoleKeywordSet())

        assert result.technical_score == 0
        assert result.soft_score == 0
        assert result.base_score == 0
        assert result.context_bonus == 0
        assert result.final_score == 0
        assert result.total_keywords == 0
        assert result.match_percentage == 0

    def test_empty_resume(self):
        result = calculate_score("", FULL_STACK)
        assert result.final_score == 0
        assert result.matched_count == 0
        assert len(result.missing_technical) == 20
        assert len(result.missing_soft) == 5

    @pytest.mark.parametrize("role", ["Java Developer", "Medical", "SEO", "HR"])
    def test_scores_stay_in_range(self, role):
        text = "Experience with Java, Spring Boot, SEO, HIPAA, Payroll, Communication, Teamwork " * 20
        result = calculate_score(text, get_keywords_for_role(role))

        assert 0 <= result.technical_score <= 100
        assert 0 <= result.soft_score <= 100
        assert 0 <= result.context_bonus <= 25
        assert 0 <= result.final_score <= 100
