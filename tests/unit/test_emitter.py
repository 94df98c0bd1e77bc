"""Unit tests for artifact emission.

Tests for EmitOptions, data_uri and ArtifactEmitter using a stub
generation result, so no font is compiled.
"""

import base64
import hashlib
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from iconfont.config import FontFormat, HostOptions, IconFontConfig, InvocationParams
from iconfont.core.emitter import ArtifactEmitter, EmitOptions, data_uri, emit, public_url
from iconfont.domain import (
    BuildGraph,
    ExternalArtifact,
    GenerationRequest,
    GenerationResult,
    InlineArtifact,
)
from iconfont.exceptions import ConfigurationError
from iconfont.utils import PipelineLogger

PAYLOADS = {
    FontFormat.EOT: b"eot-bytes",
    FontFormat.WOFF: b"woff-bytes",
    FontFormat.TTF: b"ttf-bytes",
    FontFormat.SVG: b"<svg>font</svg>",
}


def make_request(*types: FontFormat, font_name: str = "myicons") -> GenerationRequest:
    """Create a request for the given formats."""
    return GenerationRequest(
        files=("/icons/star.svg", "/icons/heart.svg"),
        font_name=font_name,
        types=types,
        order=types,
        font_height=1000,
        rename=lambda path: Path(path).stem,
        template_options={"baseClass": "icon", "classPrefix": "icon-"},
    )


def make_result(*types: FontFormat) -> tuple[GenerationResult, list]:
    """Create a result whose stylesheet lists the URLs it was given."""
    calls = []

    def generate_css(urls):
        calls.append(dict(urls))
        return "\n".join(f"{fmt.value} {url}" for fmt, url in urls.items())

    result = GenerationResult(
        fonts={fmt: PAYLOADS[fmt] for fmt in types},
        generate_css=generate_css,
    )
    return result, calls


class TestEmitOptions:
    """Tests for EmitOptions."""

    def test_defaults(self):
        """Test default emission options."""
        options = EmitOptions()
        assert options.embed is False
        assert options.html is False
        assert options.file_name == "[hash]-[fontname].[ext]"
        assert options.public_path == "/"

    def test_html_requires_file_name(self):
        """Test html output without htmlFileName is rejected."""
        with pytest.raises(ConfigurationError, match="htmlFileName"):
            EmitOptions(html=True)

    def test_from_config_merges(self, tmp_path):
        """Test settings are merged from config, params and host."""
        config = IconFontConfig.model_validate(
            {"files": ["a.svg"], "fontName": "x", "html": True, "htmlFileName": "x.html"}
        )
        host = HostOptions(context=tmp_path, public_path="/static/")
        params = InvocationParams(embed=True)

        options = EmitOptions.from_config(config, host, params)

        assert options.embed is True
        assert options.html is True
        assert options.html_file_name == "x.html"
        assert options.public_path == "/static/"
        assert options.context == tmp_path

    def test_config_file_name_wins(self, tmp_path):
        """Test config fileName takes precedence over the invocation parameter."""
        config = IconFontConfig.model_validate(
            {"files": ["a.svg"], "fontName": "x", "fileName": "[fontname].[ext]"}
        )
        params = InvocationParams(file_name="[hash].[ext]")

        options = EmitOptions.from_config(config, HostOptions(context=tmp_path), params)

        assert options.file_name == "[fontname].[ext]"

    def test_params_file_name_used(self, tmp_path):
        """Test the invocation fileName applies when the config has none."""
        config = IconFontConfig.model_validate({"files": ["a.svg"], "fontName": "x"})
        params = InvocationParams(file_name="[hash].[ext]")

        options = EmitOptions.from_config(config, HostOptions(context=tmp_path), params)

        assert options.file_name == "[hash].[ext]"

    def test_empty_public_path_defaults_to_root(self, tmp_path):
        """Test an empty host public path falls back to /."""
        config = IconFontConfig.model_validate({"files": ["a.svg"], "fontName": "x"})
        host = HostOptions(context=tmp_path, public_path="")

        options = EmitOptions.from_config(config, host)

        assert options.public_path == "/"

    def test_params_html_without_file_name(self, tmp_path):
        """Test html requested by params still needs htmlFileName."""
        config = IconFontConfig.model_validate({"files": ["a.svg"], "fontName": "x"})

        with pytest.raises(ConfigurationError):
            EmitOptions.from_config(
                config, HostOptions(context=tmp_path), InvocationParams(html=True)
            )


class TestDataUri:
    """Tests for data_uri and public_url."""

    def test_woff(self):
        """Test WOFF data URIs carry the font MIME type."""
        uri = data_uri(FontFormat.WOFF, b"woff-bytes")
        assert uri == (
            "data:application/font-woff;charset=utf-8;base64,"
            + base64.b64encode(b"woff-bytes").decode("ascii")
        )

    def test_every_format_has_mime_type(self):
        """Test every format can be embedded."""
        for font_format in FontFormat:
            assert data_uri(font_format, b"x").startswith("data:")

    def test_svg_mime_type(self):
        """Test SVG fonts use image/svg+xml."""
        assert data_uri(FontFormat.SVG, b"x").startswith("data:image/svg+xml;")

    def test_public_url_forward_slashes(self):
        """Test backslashes become forward slashes."""
        assert public_url("/static\\", "fonts\\a.woff") == "/static/fonts/a.woff"


class TestArtifactEmitter:
    """Tests for ArtifactEmitter."""

    def test_external_artifacts(self):
        """Test each format is emitted under its own content-hashed name."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF, FontFormat.TTF)
        result, calls = make_result(FontFormat.WOFF, FontFormat.TTF)

        emission = ArtifactEmitter(graph, EmitOptions()).emit(result, request)

        woff_name = hashlib.md5(b"woff-bytes").hexdigest() + "-myicons.woff"
        ttf_name = hashlib.md5(b"ttf-bytes").hexdigest() + "-myicons.ttf"
        assert graph.emitted == {woff_name: b"woff-bytes", ttf_name: b"ttf-bytes"}
        assert calls == [
            {FontFormat.WOFF: "/" + woff_name, FontFormat.TTF: "/" + ttf_name}
        ]
        assert emission.styles == f"woff /{woff_name}\nttf /{ttf_name}"

    def test_urls_are_distinct(self):
        """Test formats never share a URL."""
        graph = BuildGraph()
        request = make_request(FontFormat.SVG, FontFormat.TTF)
        result, _ = make_result(FontFormat.SVG, FontFormat.TTF)

        emission = ArtifactEmitter(graph, EmitOptions()).emit(result, request)

        assert len(set(emission.urls.values())) == 2
        assert len(graph.emitted) == 2

    def test_svg_hash_shared(self):
        """Test every format is named after the SVG payload hash when SVG is built."""
        graph = BuildGraph()
        request = make_request(FontFormat.TTF, FontFormat.SVG)
        result, _ = make_result(FontFormat.TTF, FontFormat.SVG)

        ArtifactEmitter(graph, EmitOptions()).emit(result, request)

        svg_hash = hashlib.md5(PAYLOADS[FontFormat.SVG]).hexdigest()
        assert sorted(graph.emitted) == [
            f"{svg_hash}-myicons.svg",
            f"{svg_hash}-myicons.ttf",
        ]

    def test_order_follows_request(self):
        """Test descriptors and URLs follow the request order."""
        graph = BuildGraph()
        order = (FontFormat.TTF, FontFormat.EOT, FontFormat.WOFF)
        request = make_request(*order)
        result, calls = make_result(*order)

        emission = ArtifactEmitter(graph, EmitOptions()).emit(result, request)

        assert tuple(emission.artifacts) == order
        assert tuple(calls[0]) == order

    def test_public_path(self):
        """Test URLs are prefixed with the public path."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF)
        result, _ = make_result(FontFormat.WOFF)
        options = EmitOptions(public_path="/static/", file_name="[fontname].[ext]")

        emission = ArtifactEmitter(graph, options).emit(result, request)

        artifact = emission.artifacts[FontFormat.WOFF]
        assert isinstance(artifact, ExternalArtifact)
        assert artifact.url == "/static/myicons.woff"
        assert artifact.file_name == "myicons.woff"
        assert emission.external == [artifact]

    def test_dotted_file_name(self):
        """Test [ext] expands to the bare format after a literal dot."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF)
        result, _ = make_result(FontFormat.WOFF)
        options = EmitOptions(file_name="[fontname].[hash:8].[ext]")

        emission = ArtifactEmitter(graph, options).emit(result, request)

        digest = hashlib.md5(b"woff-bytes").hexdigest()[:8]
        assert emission.artifacts[FontFormat.WOFF].file_name == f"myicons.{digest}.woff"
        assert ".." not in emission.artifacts[FontFormat.WOFF].file_name

    def test_embed(self):
        """Test embedded formats become data URIs and emit no files."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF, FontFormat.TTF)
        result, calls = make_result(FontFormat.WOFF, FontFormat.TTF)

        emission = ArtifactEmitter(graph, EmitOptions(embed=True)).emit(result, request)

        assert graph.emitted == {}
        assert all(isinstance(a, InlineArtifact) for a in emission.artifacts.values())
        assert calls[0][FontFormat.WOFF].startswith("data:application/font-woff;")
        assert calls[0][FontFormat.TTF].startswith("data:application/x-font-ttf;")
        assert emission.external == []

    def test_stylesheet_generated_once(self):
        """Test generate_css is called exactly once with every format."""
        graph = BuildGraph()
        types = (FontFormat.EOT, FontFormat.WOFF, FontFormat.TTF, FontFormat.SVG)
        result, calls = make_result(*types)

        ArtifactEmitter(graph, EmitOptions()).emit(result, make_request(*types))

        assert len(calls) == 1
        assert set(calls[0]) == set(types)

    def test_preview(self):
        """Test the HTML preview is rendered and emitted."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF)
        result, _ = make_result(FontFormat.WOFF)
        renderer = MagicMock(return_value="<html>preview</html>")
        options = EmitOptions(
            html=True,
            html_file_name="[fontname][ext].html",
            file_name="[fontname].[ext]",
        )

        emission = ArtifactEmitter(graph, options, preview_renderer=renderer).emit(
            result, request
        )

        renderer.assert_called_once_with(
            ["star", "heart"],
            "myicons",
            emission.styles,
            {"baseClass": "icon", "classPrefix": "icon-"},
        )
        assert emission.preview is not None
        assert emission.preview.file_name == "myicons.html"
        assert graph.emitted["myicons.html"] == b"<html>preview</html>"

    def test_preview_with_hash(self):
        """Test the preview name can be content-hashed."""
        graph = BuildGraph()
        request = make_request(FontFormat.WOFF)
        result, _ = make_result(FontFormat.WOFF)
        options = EmitOptions(html=True, html_file_name="[hash:hex:8].html")
        renderer = MagicMock(return_value="<html></html>")

        emission = ArtifactEmitter(graph, options, preview_renderer=renderer).emit(
            result, request
        )

        expected = hashlib.md5(b"<html></html>").hexdigest()[:8] + ".html"
        assert emission.preview.file_name == expected

    def test_no_preview_by_default(self):
        """Test no preview without html."""
        graph = BuildGraph()
        result, _ = make_result(FontFormat.WOFF)

        emission = ArtifactEmitter(graph, EmitOptions()).emit(
            result, make_request(FontFormat.WOFF)
        )

        assert emission.preview is None

    def test_logger_stats(self):
        """Test emission updates pipeline statistics."""
        graph = BuildGraph()
        logger = PipelineLogger(logger=MagicMock())
        types = (FontFormat.WOFF, FontFormat.TTF)
        result, _ = make_result(*types)

        ArtifactEmitter(graph, EmitOptions(), logger=logger).emit(result, make_request(*types))

        assert logger.stats.external_count == 2
        assert logger.stats.bytes_emitted == len(b"woff-bytes") + len(b"ttf-bytes")
        assert logger.stats.emitted_files == list(graph.emitted)

    def test_emit_function(self):
        """Test the module-level emit helper."""
        graph = BuildGraph()
        result, _ = make_result(FontFormat.TTF)

        emission = emit(result, make_request(FontFormat.TTF), graph, EmitOptions(embed=True))

        assert emission.urls[FontFormat.TTF].startswith("data:")
