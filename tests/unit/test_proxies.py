"""
Unit tests for proxied rule objects and the proxy rule factory.
"""

import pytest

from fluent_rules.core.errors import UnresolvableRuleCall
from fluent_rules.core.proxies import (
    Dimensions,
    Exists,
    In,
    NotIn,
    ProxyRule,
    ProxyRuleFactory,
    Unique,
    default_proxy_factory,
)


class TestUnique:
    """Tests for the unique rule"""

    def test_table_only(self):
        """Test defaults for column, ignore and id column"""
        assert str(Unique("users")) == "unique:users,NULL,NULL,id"

    def test_ignore_with_id_column(self):
        """Test ignore renders a quoted id and custom id column"""
        rule = Unique("users", "email").ignore(5, "user_id")

        assert str(rule) == 'unique:users,email,"5",user_id'

    def test_ignore_escapes_quotes(self):
        """Test quotes in the ignored id are backslash escaped"""
        rule = Unique("users").ignore('a"b')

        assert str(rule) == 'unique:users,NULL,"a\\"b",id'

    def test_falsy_ignore_renders_null(self):
        """Test an empty ignore id is treated as no ignore"""
        assert str(Unique("users").ignore(0)) == "unique:users,NULL,NULL,id"

    def test_where_family(self):
        """Test every where variant renders column,value pairs"""
        rule = (
            Unique("users")
            .where("account_id", 1)
            .where_not("status", "deleted")
            .where_null("deleted_at")
            .where_not_null("verified_at")
        )

        assert str(rule) == (
            "unique:users,NULL,NULL,id,"
            "account_id,1,status,!deleted,deleted_at,NULL,verified_at,NOT_NULL"
        )


class TestExists:
    """Tests for the exists rule"""

    def test_table_only(self):
        """Test trailing separators are trimmed"""
        assert str(Exists("roles")) == "exists:roles,NULL"

    def test_column_and_where(self):
        """Test column and where constraints"""
        rule = Exists("roles", "name").where("guard", "web")

        assert str(rule) == "exists:roles,name,guard,web"

    def test_does_not_support_ignore(self):
        """Test ignore is unique-only"""
        assert Exists("roles").supports("where") is True
        assert Exists("roles").supports("ignore") is False


class TestMembershipRules:
    """Tests for in and not_in"""

    def test_variadic_and_list_forms(self):
        """Test values may be passed individually or as one list"""
        assert str(In("a", "b")) == 'in:"a","b"'
        assert str(In(["a", "b"])) == 'in:"a","b"'
        assert str(In({"only"})) == 'in:"only"'

    def test_quotes_are_doubled(self):
        """Test embedded quotes are escaped by doubling"""
        assert str(In('say "hi"')) == 'in:"say ""hi"""'

    def test_not_in(self):
        """Test not_in renders non-string values"""
        assert str(NotIn(1, 2)) == 'not_in:"1","2"'

    def test_no_configuration_methods(self):
        """Test membership rules cannot be configured further"""
        rule = In("a")

        assert rule.supports("where") is False
        with pytest.raises(UnresolvableRuleCall):
            rule.configure("where", "x", 1)

    def test_repr(self):
        """Test repr wraps the rendered token"""
        assert repr(In("a")) == "In('in:\"a\"')"


class TestDimensions:
    """Tests for the dimensions rule"""

    def test_constraints_in_insertion_order(self):
        """Test constructor constraints then chained ones"""
        rule = Dimensions({"min_width": 100}).ratio("3/2")

        assert str(rule) == "dimensions:min_width=100,ratio=3/2"

    def test_keyword_constraints(self):
        """Test constraints passed as keywords"""
        rule = Dimensions(width=640, height=480)

        assert str(rule) == "dimensions:width=640,height=480"

    def test_setting_again_replaces_value(self):
        """Test a constraint set twice keeps its position"""
        rule = Dimensions(max_width=500, max_height=300).max_width(400)

        assert str(rule) == "dimensions:max_width=400,max_height=300"

    def test_configure_by_name(self):
        """Test configure dispatches declared methods"""
        rule = Dimensions()

        returned = rule.configure("min_height", 50)

        assert returned is rule
        assert str(rule) == "dimensions:min_height=50"


class TestProxyRuleFactory:
    """Tests for ProxyRuleFactory"""

    def test_default_registry(self):
        """Test the default factory knows every proxied rule"""
        assert default_proxy_factory.rule_names() == ["dimensions", "exists", "in", "not_in", "unique"]

    def test_create_passes_arguments_through(self):
        """Test positional and keyword arguments reach the constructor"""
        rule = ProxyRuleFactory().create("unique", "users", column="email")

        assert isinstance(rule, Unique)
        assert str(rule) == "unique:users,email,NULL,id"

    def test_unknown_rule(self):
        """Test unknown names are unresolvable"""
        with pytest.raises(UnresolvableRuleCall):
            ProxyRuleFactory().create("nonsense")

    def test_register(self, proxy_factory):
        """Test registering a new rule class"""

        class Uppercase(ProxyRule):
            rule_name = "uppercase"

            def __str__(self):
                return "uppercase"

        proxy_factory.register("uppercase", Uppercase)

        assert isinstance(proxy_factory.create("uppercase"), Uppercase)
        assert "uppercase" not in default_proxy_factory.rule_names()

    def test_empty_registry(self):
        """Test an explicit empty registry disables proxied rules"""
        factory = ProxyRuleFactory(registry={})

        assert factory.rule_names() == []
        with pytest.raises(UnresolvableRuleCall):
            factory.create("unique", "users")
