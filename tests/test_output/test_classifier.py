"""Tests for output classification."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest
from PIL import Image

from notebooktex.models import EvaluatedResult, FigureCounter, OutputArtifact
from notebooktex.output.classifier import OutputClassifier, figure_filename


@pytest.fixture
def project(tmp_path):
    (tmp_path / "figures").mkdir()
    return tmp_path


@pytest.fixture
def classifier(project):
    return OutputClassifier(project, "chapter", FigureCounter(), text_max_length=3)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def result(value=None, image_path=None):
    return EvaluatedResult(cell_id="cell", value=value, image_path=image_path)


class TestOutputClassifier:
    """Tests for OutputClassifier class."""

    def test_image_reference(self, classifier):
        """Test a pre-typed image path wins and leaves the counter alone."""
        artifact = classifier.classify(result(value=plt.figure(), image_path="/abs/cat.png"))

        assert artifact == OutputArtifact.image("/abs/cat.png")
        assert classifier.counter.value == 0

    def test_none_value(self, classifier):
        """Test None classifies as no output."""
        assert classifier.classify(result(None)).kind == "none"

    def test_matplotlib_figure_saved_as_pdf(self, classifier, project):
        """Test a figure is saved as the next numbered PDF."""
        fig, ax = plt.subplots()
        ax.plot([1, 2, 3], [1, 4, 9])

        artifact = classifier.classify(result(fig))

        assert artifact == OutputArtifact.plot("chapter_figure1.pdf")
        assert (project / "figures" / "chapter_figure1.pdf").exists()

    @pytest.mark.parametrize("pick", ["axes", "subplots", "line", "lines", "axes_pair"])
    def test_matplotlib_related_values(self, classifier, project, pick):
        """Test axes, subplots tuples and attached artists count as figures."""
        fig, (ax, other) = plt.subplots(1, 2)
        lines = ax.plot([0, 1], [1, 0])
        value = {
            "axes": ax,
            "subplots": (fig, ax),
            "line": lines[0],
            "lines": lines,
            "axes_pair": (ax, other),
        }[pick]

        artifact = classifier.classify(result(value))

        assert artifact.kind == "plot"
        assert artifact.payload.endswith(".pdf")

    def test_plot_call_result_saved_as_pdf(self, classifier, project):
        """Test the line list returned by plt.plot is saved as its figure."""
        artifact = classifier.classify(result(plt.plot([1, 2, 3])))

        assert artifact == OutputArtifact.plot("chapter_figure1.pdf")
        assert (project / "figures" / "chapter_figure1.pdf").exists()

    def test_artists_from_different_figures_are_text(self, classifier):
        """Test artists spanning several figures do not pick one of them."""
        first = plt.figure().add_subplot()
        second = plt.figure().add_subplot()

        artifact = classifier.classify(result([first, second]))

        assert artifact.kind == "text"
        assert classifier.counter.value == 0

    def test_saved_figure_is_closed(self, classifier):
        """Test saved figures are released from pyplot."""
        fig = plt.figure()

        classifier.classify(result(fig))

        assert not plt.fignum_exists(fig.number)

    def test_pillow_image_saved_as_png(self, classifier, project):
        """Test raster images are saved as PNG."""
        image = Image.new("RGB", (4, 4), color="red")

        artifact = classifier.classify(result(image))

        assert artifact == OutputArtifact.plot("chapter_figure1.png")
        assert Image.open(project / "figures" / "chapter_figure1.png").size == (4, 4)

    def test_cmyk_image_converted(self, classifier, project):
        """Test modes PNG cannot store are converted before saving."""
        artifact = classifier.classify(result(Image.new("CMYK", (2, 2))))

        assert (project / "figures" / artifact.payload).exists()

    def test_counter_spans_both_families(self, classifier):
        """Test figure numbers increase across PDF and PNG outputs."""
        first = classifier.classify(result(plt.figure()))
        second = classifier.classify(result(Image.new("L", (2, 2))))
        third = classifier.classify(result(plt.figure()))

        assert [first.payload, second.payload, third.payload] == [
            "chapter_figure1.pdf",
            "chapter_figure2.png",
            "chapter_figure3.pdf",
        ]
        assert classifier.counter.value == 3

    @pytest.mark.parametrize(
        "value, rendered",
        [
            (42, "42"),
            ("hi", "'hi'"),
            ({"a": 1}, "{'a': 1}"),
            (False, "False"),
        ],
    )
    def test_text_rendering(self, classifier, value, rendered):
        """Test other values render as console text."""
        assert classifier.classify(result(value)) == OutputArtifact.text(rendered)

    def test_text_is_truncated(self, classifier):
        """Test long containers are abbreviated like a console display."""
        artifact = classifier.classify(result(list(range(10))))

        assert "... +7" in artifact.payload

    def test_text_does_not_touch_counter(self, classifier):
        """Test text outputs do not consume figure numbers."""
        classifier.classify(result("text"))

        assert classifier.counter.value == 0

    def test_figure_filename(self):
        """Test figure names are deterministic."""
        assert figure_filename("intro", 3, "png") == "intro_figure3.png"
