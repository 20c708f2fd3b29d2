from application.services.variable_table import VariableTable


class TestVariableTable:
    def test_substitute_replaces_every_occurrence(self):
        table = VariableTable()
        table.define("token", "abc")
        assert table.substitute("token and token") == "abc and abc"

    def test_substitute_is_not_token_aware(self):
        table = VariableTable()
        table.define("id", "7")
        assert table.substitute("* param hidden = id") == "* param h7den = 7"

    def test_redefine_overwrites(self):
        table = VariableTable()
        table.define("a", "1")
        table.define("a", "2")
        assert table.get("a") == "2"
        assert table.substitute("a + a") == "2 + 2"

    def test_missing_name(self):
        table = VariableTable()
        assert table.get("missing") is None
        assert table.substitute("missing") == "missing"
