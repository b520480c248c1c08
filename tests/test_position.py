from api_spec_dsl.parser.position import offset_to_pos

TEXT = "ab\ncd\n\nef"


class TestOffsetToPos:
    def test_first_character(self):
        assert offset_to_pos("api.dsl", TEXT, 0) == "api.dsl:1:1"

    def test_within_first_line(self):
        assert offset_to_pos("api.dsl", TEXT, 1) == "api.dsl:1:2"

    def test_newline_belongs_to_its_line(self):
        assert offset_to_pos("api.dsl", TEXT, 2) == "api.dsl:1:3"

    def test_start_of_second_line(self):
        assert offset_to_pos("api.dsl", TEXT, 3) == "api.dsl:2:1"

    def test_empty_line(self):
        assert offset_to_pos("api.dsl", TEXT, 6) == "api.dsl:3:1"

    def test_last_line_without_trailing_newline(self):
        assert offset_to_pos("api.dsl", TEXT, 8) == "api.dsl:4:2"

    def test_end_of_text_has_no_column(self):
        assert offset_to_pos("api.dsl", TEXT, len(TEXT)) == "api.dsl:4"

    def test_end_of_empty_text(self):
        assert offset_to_pos("api.dsl", "", 0) == "api.dsl:1"
