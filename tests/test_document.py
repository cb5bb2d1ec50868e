import io
import logging
import pytest
from svglayout import (
    Circle,
    Color,
    Dimensions,
    Document,
    Fill,
    Layout,
    OwnershipError,
    Point,
    Rectangle,
    Text,
    Container,
)
from svglayout.document import PREAMBLE
from svglayout.sink import FileSink, StreamSink, open_sink


SVG_OPEN = (
    '<svg width="100px" height="100px" '
    'xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)


def make_doc(origin="bottomleft", mode="wrapper", target=None):
    layout = Layout(Dimensions(100, 100), origin, mode=mode)
    doc = Document(target if target is not None else io.StringIO(), layout)
    doc.append(Circle(Point(80, 80), 40, Fill(Color(100, 200, 120))))
    return doc


def test_document_init():
    doc = Document("out.svg")
    assert doc.layout == Layout()
    assert len(doc) == 0
    assert doc.shapes == []


def test_preamble():
    out = Document(io.StringIO()).render()
    assert out.startswith('<?xml version="1.0" standalone="no"?>\n<!DOCTYPE svg PUBLIC')
    assert '<svg width="400px" height="300px"' in out
    assert out.endswith("</svg>\n")


def test_end_to_end_wrapper():
    assert make_doc().render() == (
        PREAMBLE
        + SVG_OPEN
        + '\t<g transform="scale(1 -1) translate(0 -100)">\n'
        + '\t\t<circle cx="80" cy="80" r="20" fill="rgb(100,200,120)" />\n'
        + "\t</g>\n"
        + "</svg>\n"
    )


def test_end_to_end_per_coordinate():
    assert make_doc(mode="coordinates").render() == (
        PREAMBLE
        + SVG_OPEN
        + '\t<circle cx="80" cy="20" r="20" fill="rgb(100,200,120)" />\n'
        + "</svg>\n"
    )


def test_identity_layout_is_the_same_in_both_modes():
    wrapped = make_doc("topleft", "wrapper")
    mapped = make_doc("topleft", "coordinates")

    for doc in (wrapped, mapped):
        doc.append(Rectangle(Point(5, 5), 10, 20), Text(Point(1, 2), "t"))

    assert wrapped.render() == mapped.render()
    assert "<g" not in wrapped.render()
    assert wrapped.wrapper() is None


def test_scaled_topleft_still_wraps():
    layout = Layout(Dimensions(100, 100), "topleft", scale=2)
    doc = Document(io.StringIO(), layout).append(Circle(Point(1, 1), 2))
    assert '<g transform="scale(2 2) translate(0 0)">' in doc.render()


def test_zero_scale_renders():
    doc = Document(io.StringIO(), Layout(scale=0))
    doc.append(Circle(Point(0, 0), 1))

    out = doc.render()
    assert '<g transform="translate(0 300) scale(0 0) translate(0 0)">' in out
    assert doc.persist() is True


def test_empty_document():
    doc = Document(io.StringIO(), Layout(Dimensions(100, 100)))
    assert doc.render() == PREAMBLE + SVG_OPEN + "</svg>\n"


def test_render_is_repeatable():
    doc = make_doc()
    assert doc.render() == doc.render()
    assert str(doc) == doc.render()
    assert doc._repr_svg_() == doc.render()


def test_changing_layout_between_renders():
    doc = make_doc()
    wrapped = doc.render()
    doc.layout = doc.layout.with_mode("coordinates")

    assert "transform" not in doc.render()
    assert doc.render() != wrapped


def test_document_owns_shapes():
    doc = make_doc()
    with pytest.raises(OwnershipError):
        Container().append(doc.shapes[0])


def test_append_chains():
    doc = Document(io.StringIO())
    doc.append(Circle(Point(0, 0), 1)).append(Circle(Point(1, 1), 1))
    assert len(doc) == 2


# --- Persisting ---


def test_persist_to_stream():
    stream = io.StringIO()
    doc = make_doc(target=stream)
    assert doc.persist() is True
    assert stream.getvalue() == doc.render()


def test_persist_to_file(tmp_path):
    path = tmp_path / "my_svg.svg"
    doc = make_doc(target=path)
    assert doc.save() is True
    assert path.read_text(encoding="utf-8") == doc.render()


def test_persist_failure_is_reported(tmp_path, caplog):
    doc = make_doc(target=tmp_path / "missing" / "dir" / "out.svg")

    with caplog.at_level(logging.WARNING):
        assert doc.persist() is False

    assert "Cannot write" in caplog.text


def test_persist_to_directory_fails(tmp_path):
    assert make_doc(target=tmp_path).persist() is False


def test_unencodable_document_keeps_old_file(tmp_path, caplog):
    path = tmp_path / "out.svg"
    path.write_text("previous", encoding="utf-8")

    doc = make_doc(target=path)
    doc.append(Text(Point(1, 1), "bad \ud800 surrogate"))

    with caplog.at_level(logging.WARNING):
        assert doc.persist() is False

    assert path.read_text(encoding="utf-8") == "previous"
    assert "Cannot encode" in caplog.text


def test_persist_to_closed_stream_fails(caplog):
    stream = io.StringIO()
    stream.close()

    with caplog.at_level(logging.WARNING):
        assert make_doc(target=stream).persist() is False

    assert "Cannot write" in caplog.text


def test_open_sink():
    assert isinstance(open_sink("a.svg"), FileSink)
    assert isinstance(open_sink(io.StringIO()), StreamSink)

    sink = StreamSink(io.StringIO())
    assert open_sink(sink) is sink


# --- Export ---


def test_export_svg(tmp_path):
    path = tmp_path / "test.svg"
    make_doc().export(path)
    assert path.exists()
    with open(path, "r") as f:
        assert "<svg" in f.read()


def test_export_png(tmp_path):
    path = tmp_path / "test.png"
    try:
        make_doc().export(path)
        assert path.exists()
    except ImportError:
        pytest.skip("cairosvg not installed")


def test_export_unsupported(tmp_path):
    path = tmp_path / "test.txt"
    with pytest.raises(ValueError, match="Unsupported"):
        make_doc().export(path)


def test_export_without_cairosvg(tmp_path, monkeypatch):
    import sys

    monkeypatch.setitem(sys.modules, "cairosvg", None)
    with pytest.raises(ImportError, match="svglayout\\[export\\]"):
        make_doc().export(tmp_path / "test.pdf")


# --- Display ---


def test_display_no_ipython(monkeypatch):
    # Mock sys.modules to simulate IPython not being installed
    import sys

    monkeypatch.setitem(sys.modules, "IPython.display", None)
    with pytest.raises(ImportError, match="IPython is required"):
        make_doc().display()


def test_display_success(monkeypatch):
    from unittest.mock import MagicMock

    mock_display = MagicMock()
    mock_svg = MagicMock()

    class MockIPython:
        SVG = mock_svg
        display = mock_display

    import sys

    monkeypatch.setitem(sys.modules, "IPython.display", MockIPython)

    doc = make_doc()
    doc.display()
    assert mock_display.called
    mock_svg.assert_called_once_with(doc.render())
