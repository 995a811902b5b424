from resume_analyzer.scoring.normalizer import contains_keyword, variants_of


class TestVariants:
    def test_js_suffix_is_stripped(self):
        assert variants_of("Node.js") == {"node.js", "node"}

    def test_spaces_and_hyphens_are_removed(self):
        assert variants_of("Spring Boot") == {"spring boot", "springboot"}
        assert "onpageseo" in variants_of("On-Page SEO")

    def test_net_suffix_is_stripped(self):
        assert variants_of("ASP.NET") == {"asp.net", "asp"}


class TestContainsKeyword:
    def test_plain_match_is_case_insensitive(self):
        assert contains_keyword("senior react developer", "React")

    def test_variant_match(self):
        """'nodejs' is found through the 'node' variant of 'Node.js'."""
        assert contains_keyword("built services in nodejs", "Node.js")

    def test_compacted_variant_match(self):
        assert contains_keyword("springboot microservices", "Spring Boot")

    def test_absent_keyword(self):
        assert not contains_keyword("python and flask", "Django")

    def test_substring_false_positive_is_accepted(self):
        """Matching is plain containment: 'Java' is found inside 'JavaScript'."""
        assert contains_keyword("javascript developer", "Java")

    def test_empty_haystack(self):
        assert not contains_keyword("", "Python")
