import pytest

from schemagen.shared.errors import ConfigurationError
from schemagen.struct_codegen.catalog import ColumnRef, TableRef
from schemagen.struct_codegen.overrides import (
    ArrayColumnOverride,
    ColumnOverride,
    TargetType,
    TypeDefault,
    parse_column_ref,
    parse_override,
    parse_target_type,
    resolve_column_override,
    resolve_type_default,
)

from conftest import make_column


class TestParseTargetType:
    @pytest.mark.parametrize(
        "raw,import_path,type_name",
        [
            ("example.com/pkg.CustomType", "example.com/pkg", "pkg.CustomType"),
            ("github.com/lib/pq.StringArray", "github.com/lib/pq", "pq.StringArray"),
            ("github.com/segmentio/ksuid.KSUID", "github.com/segmentio/ksuid", "ksuid.KSUID"),
            ("time.Time", "time", "time.Time"),
            ("github.com/gofrs/go-uuid.UUID", "github.com/gofrs/go-uuid", "uuid.UUID"),
            ("github.com/shopspring/decimal-go.Decimal", "github.com/shopspring/decimal-go", "decimal.Decimal"),
            ("*github.com/x/null.String", "github.com/x/null", "*null.String"),
        ],
    )
    def test_parse(self, raw, import_path, type_name):
        target = parse_target_type(raw)
        assert target == TargetType(import_path=import_path, type_name=type_name)

    def test_pointer_flag(self):
        assert parse_target_type("*github.com/x/null.String").is_pointer
        assert not parse_target_type("github.com/x/null.String").is_pointer

    @pytest.mark.parametrize("raw", ["CustomType", "", "example.com/pkg.", ".Type"])
    def test_malformed(self, raw):
        with pytest.raises(ConfigurationError, match="not the proper format"):
            parse_target_type(raw)

    def test_malformed_carries_package(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_target_type("CustomType", "db")
        assert exc_info.value.package == "db"
        assert exc_info.value.override == "CustomType"


class TestParseColumnRef:
    def test_table_column_defaults_to_public(self):
        assert parse_column_ref("foo.retyped") == ColumnRef("public", "foo", "retyped")

    def test_schema_table_column(self):
        assert parse_column_ref("app.foo.retyped") == ColumnRef("app", "foo", "retyped")

    @pytest.mark.parametrize("raw", ["retyped", "a.b.c.d", "foo.", ".retyped"])
    def test_invalid(self, raw):
        with pytest.raises(ConfigurationError, match="column reference"):
            parse_column_ref(raw)


class TestParseOverride:
    def test_column_override(self):
        rule = parse_override({"go_type": "example.com/pkg.CustomType", "column": "foo.retyped"})
        assert isinstance(rule, ColumnOverride)
        assert rule.column == ColumnRef("public", "foo", "retyped")
        assert rule.target.type_name == "pkg.CustomType"
        assert rule.target.import_path == "example.com/pkg"

    def test_array_column_override(self):
        rule = parse_override(
            {"go_type": "github.com/lib/pq.StringArray", "column": "foo.languages", "array": True}
        )
        assert isinstance(rule, ArrayColumnOverride)
        assert rule.target.type_name == "pq.StringArray"

    def test_array_false_is_column_override(self):
        rule = parse_override({"go_type": "a.com/b.C", "column": "foo.bar", "array": False})
        assert isinstance(rule, ColumnOverride)

    def test_type_default(self):
        rule = parse_override({"go_type": "github.com/segmentio/ksuid.KSUID", "postgres_type": "uuid"})
        assert rule == TypeDefault(
            sql_type="uuid",
            nullable=False,
            target=TargetType("github.com/segmentio/ksuid", "ksuid.KSUID"),
        )

    def test_nullable_type_default(self):
        rule = parse_override({"go_type": "a.com/null.String", "postgres_type": "text", "null": True})
        assert isinstance(rule, TypeDefault)
        assert rule.nullable is True

    def test_both_column_and_type(self):
        with pytest.raises(ConfigurationError, match="both 'column'"):
            parse_override({"go_type": "a.com/b.C", "column": "foo.bar", "postgres_type": "text"})

    def test_neither_column_nor_type(self):
        with pytest.raises(ConfigurationError, match="one of either"):
            parse_override({"go_type": "a.com/b.C"})

    def test_missing_go_type(self):
        with pytest.raises(ConfigurationError, match="missing required 'go_type'"):
            parse_override({"column": "foo.bar"})

    def test_malformed_go_type_fails_at_parse_time(self):
        with pytest.raises(ConfigurationError, match="not the proper format"):
            parse_override({"go_type": "CustomType", "column": "foo.bar"}, "db")

    def test_null_on_column_override(self):
        with pytest.raises(ConfigurationError, match="'null' only applies"):
            parse_override({"go_type": "a.com/b.C", "column": "foo.bar", "null": True})

    def test_array_on_type_default(self):
        with pytest.raises(ConfigurationError, match="'array' only applies"):
            parse_override({"go_type": "a.com/b.C", "postgres_type": "text", "array": True})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError, match="must be mappings"):
            parse_override(["go_type"])


RETYPED = ColumnOverride(ColumnRef("public", "foo", "retyped"), TargetType("example.com/pkg", "pkg.CustomType"))
LANGUAGES = ArrayColumnOverride(ColumnRef("public", "foo", "languages"), TargetType("github.com/lib/pq", "pq.StringArray"))
TEXT_DEFAULT = TypeDefault("text", False, TargetType("example.com/txt", "txt.Text"))


class TestResolveColumnOverride:
    def test_exact_column_match(self):
        column = make_column("retyped", "text")
        assert resolve_column_override(column, [TEXT_DEFAULT, RETYPED]) == RETYPED.target

    def test_no_match_other_column(self):
        column = make_column("other", "text")
        assert resolve_column_override(column, [RETYPED, LANGUAGES]) is None

    def test_no_match_other_table(self):
        column = make_column("retyped", "text", table=TableRef("public", "bar"))
        assert resolve_column_override(column, [RETYPED]) is None

    def test_no_match_other_schema(self):
        column = make_column("retyped", "text", table=TableRef("app", "foo"))
        assert resolve_column_override(column, [RETYPED]) is None

    def test_array_override_matches_array_column(self):
        column = make_column("languages", "text", nullable=True, is_array=True)
        assert resolve_column_override(column, [LANGUAGES]) == LANGUAGES.target

    def test_scalar_override_skips_array_column(self):
        column = make_column("retyped", "text", is_array=True)
        assert resolve_column_override(column, [RETYPED]) is None

    def test_array_override_on_scalar_column_is_an_error(self):
        column = make_column("languages", "text")
        with pytest.raises(ConfigurationError, match="array override targets scalar column 'public.foo.languages'"):
            resolve_column_override(column, [LANGUAGES], "db")

    def test_scalar_rule_wins_when_both_shapes_configured(self):
        scalar = ColumnOverride(LANGUAGES.column, TargetType("a.com/b", "b.Lang"))
        column = make_column("languages", "text")
        assert resolve_column_override(column, [LANGUAGES, scalar]) == scalar.target

    def test_first_rule_wins(self):
        shadowed = ColumnOverride(RETYPED.column, TargetType("a.com/b", "b.Other"))
        column = make_column("retyped", "text")
        assert resolve_column_override(column, [RETYPED, shadowed]) == RETYPED.target


class TestResolveTypeDefault:
    def test_match_by_type_and_nullability(self):
        assert resolve_type_default("text", False, [RETYPED, TEXT_DEFAULT]) == TEXT_DEFAULT.target

    def test_nullability_must_agree(self):
        assert resolve_type_default("text", True, [TEXT_DEFAULT]) is None

    def test_other_type(self):
        assert resolve_type_default("bigint", False, [TEXT_DEFAULT]) is None
