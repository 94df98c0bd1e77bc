"""Unit tests for config normalization."""

from pathlib import Path

from iconfont.config import FontFormat, HostOptions, IconFontConfig, InvocationParams
from iconfont.config.settings import DEFAULT_FONT_HEIGHT, DEFAULT_FORMATS
from iconfont.core.normalizer import (
    build_template_options,
    default_rename,
    normalize,
    pass_through_options,
    select_formats,
)


def make_config(**kwargs) -> IconFontConfig:
    """Create a config with required fields filled in."""
    data = {"files": ["icons/*.svg"], "fontName": "myicons"}
    data.update(kwargs)
    return IconFontConfig.model_validate(data)


class TestDefaultRename:
    """Tests for default_rename."""

    def test_strips_directory_and_extension(self):
        """Test /a/b/star.svg becomes star."""
        assert default_rename("/a/b/star.svg") == "star"

    def test_keeps_other_extensions(self):
        """Test only a trailing .svg is removed."""
        assert default_rename("/a/b/star.png") == "star.png"

    def test_inner_svg_kept(self):
        """Test .svg in the middle of a name is kept."""
        assert default_rename("/a/my.svg.icon.svg") == "my.svg.icon"


class TestSelectFormats:
    """Tests for select_formats precedence."""

    def test_default_formats(self):
        """Test all four formats when nothing is requested."""
        assert select_formats(make_config()) == DEFAULT_FORMATS

    def test_config_types(self):
        """Test config types replace the default."""
        config = make_config(types=["woff", "ttf"])
        assert select_formats(config) == (FontFormat.WOFF, FontFormat.TTF)

    def test_scalar_config_type(self):
        """Test a scalar type is wrapped into a list."""
        config = make_config(types="svg")
        assert select_formats(config) == (FontFormat.SVG,)

    def test_params_override_config(self):
        """Test invocation types take precedence over config types."""
        config = make_config(types=["woff"])
        params = InvocationParams(types=["ttf"])
        assert select_formats(config, params) == (FontFormat.TTF,)

    def test_empty_params_types_fall_back(self):
        """Test empty invocation types fall back to config types."""
        config = make_config(types=["woff"])
        params = InvocationParams(types=[])
        assert select_formats(config, params) == (FontFormat.WOFF,)

    def test_duplicates_dropped(self):
        """Test duplicate formats keep their first position."""
        config = make_config(types=["ttf", "woff", "ttf"])
        assert select_formats(config) == (FontFormat.TTF, FontFormat.WOFF)


class TestTemplateOptions:
    """Tests for build_template_options."""

    def test_defaults(self):
        """Test default base class and class prefix."""
        assert build_template_options(make_config()) == {
            "baseClass": "icon",
            "classPrefix": "icon-",
        }

    def test_empty_base_class_uses_default(self):
        """Test an empty base class falls back to icon."""
        assert build_template_options(make_config(baseClass=""))["baseClass"] == "icon"

    def test_empty_class_prefix_kept(self):
        """Test an explicit empty class prefix is preserved."""
        assert build_template_options(make_config(classPrefix=""))["classPrefix"] == ""

    def test_user_options_override(self):
        """Test templateOptions override per key."""
        config = make_config(
            baseClass="ico",
            templateOptions={"baseClass": "glyph", "extra": 1},
        )
        assert build_template_options(config) == {
            "baseClass": "glyph",
            "classPrefix": "icon-",
            "extra": 1,
        }


class TestPassThroughOptions:
    """Tests for pass_through_options."""

    def test_unset_options_omitted(self):
        """Test nothing is passed when the config sets nothing."""
        assert pass_through_options(make_config()) == {}

    def test_set_options_passed(self):
        """Test explicitly set options are passed under their names."""
        config = make_config(fixedWidth=True, normalize=False, descent=50)
        assert pass_through_options(config) == {
            "fixed_width": True,
            "normalize": False,
            "descent": 50,
        }


class TestNormalize:
    """Tests for normalize."""

    def test_defaults(self, tmp_path):
        """Test a minimal config produces a fully defaulted request."""
        files = [str(tmp_path / "a.svg"), str(tmp_path / "b.svg")]

        request = normalize(make_config(), files, HostOptions(context=tmp_path))

        assert request.files == tuple(files)
        assert request.font_name == "myicons"
        assert request.types == DEFAULT_FORMATS
        assert request.order == request.types
        assert request.font_height == DEFAULT_FONT_HEIGHT
        assert request.css_template is None
        assert request.glyph_names == ["a", "b"]
        assert request.engine_options == {}

    def test_order_equals_types(self, tmp_path):
        """Test order always matches the selected types."""
        config = make_config(types=["svg", "eot"])

        request = normalize(config, [], HostOptions(context=tmp_path))

        assert request.order == (FontFormat.SVG, FontFormat.EOT)
        assert request.order == request.types

    def test_custom_rename(self, tmp_path):
        """Test a user rename callable is used for glyph names."""
        config = make_config(rename=lambda path: Path(path).stem.upper())

        request = normalize(config, ["/x/star.svg"], HostOptions(context=tmp_path))

        assert request.glyph_names == ["STAR"]

    def test_non_callable_rename_uses_default(self, tmp_path):
        """Test a non-callable rename value falls back to the file stem."""
        config = make_config(rename="upper")

        request = normalize(config, ["/x/star.svg"], HostOptions(context=tmp_path))

        assert request.glyph_names == ["star"]

    def test_font_height(self, tmp_path):
        """Test a configured font height is used."""
        request = normalize(make_config(fontHeight=512), [], HostOptions(context=tmp_path))
        assert request.font_height == 512

    def test_css_template_resolved(self, tmp_path):
        """Test cssTemplate is resolved against the host context."""
        config = make_config(cssTemplate="templates/icons.css.jinja")

        request = normalize(config, [], HostOptions(context=tmp_path))

        assert request.css_template == tmp_path / "templates" / "icons.css.jinja"

    def test_params_types(self, tmp_path):
        """Test invocation params select formats."""
        params = InvocationParams(types=["woff"])

        request = normalize(make_config(), [], HostOptions(context=tmp_path), params)

        assert request.types == (FontFormat.WOFF,)

    def test_format_options_passed(self, tmp_path):
        """Test per-format options reach the request."""
        config = make_config(formatOptions={"ttf": {"copyright": "ACME"}})

        request = normalize(config, [], HostOptions(context=tmp_path))

        assert request.format_options == {"ttf": {"copyright": "ACME"}}
