import pytest
from jinja2 import Environment
from lxml import html
from folksonomy.config.profile_loader import RenderProfile
from folksonomy.config.render_config import CloudConfig
from folksonomy.errors import UnsupportedVariantError
from folksonomy.helpers.renderers import parallel_tag_cloud
from folksonomy.integration.jinja_helpers import generate_tag_page, register_helpers
from folksonomy.main import main, url_generator_for
from folksonomy.models import TagCount

TAGS = [TagCount("go", 10), TagCount("rust", 1)]


def url_for_tag(tag):
    return "/tags/" + tag


def test_registered_helpers_are_not_escaped_again():
    env = register_helpers(Environment(autoescape=True), url_for_tag)
    rendered = env.from_string("{{ tag_index(tags, order='descending') }}").render(tags=TAGS)

    root = html.fromstring(rendered)
    assert root.get("id") == "tagIndex"
    assert [a.get("href") for a in root.xpath("//a")] == ["/tags/go", "/tags/rust"]


def test_helpers_without_bound_url_generator():
    env = register_helpers(Environment(autoescape=True))
    template = env.from_string("{{ tag_cloud(tags, urls, cloud) }}")
    rendered = template.render(tags=TAGS, urls=url_for_tag, cloud=CloudConfig(control_id="c"))

    assert html.fromstring(rendered).get("id") == "c"


def test_unsupported_variant_fails_in_template():
    env = Environment(autoescape=True)
    with pytest.raises(UnsupportedVariantError):
        env.from_string("{{ widget }}").render(widget=parallel_tag_cloud())


def test_generate_tag_page(tmp_path):
    output = tmp_path / "site" / "tags.html"

    result = generate_tag_page(output, TAGS, url_for_tag, widgets=["cloud", "heatmap"], profile=RenderProfile(), title="Blog <tags>")

    assert result == output
    page = output.read_text(encoding="utf-8")
    assert "<title>Blog &lt;tags&gt;</title>" in page
    assert 'class="tagCloud"' in page
    assert 'class="heatMap"' in page
    assert 'class="tagIndex"' not in page


def test_generate_tag_page_unknown_widget(tmp_path):
    with pytest.raises(ValueError):
        generate_tag_page(tmp_path / "tags.html", TAGS, url_for_tag, widgets=["parallel"])


def test_url_generator_for_quotes_tags():
    generate = url_generator_for("/tags/{tag}")
    assert generate("c#") == "/tags/c%23"
    assert generate("go") == "/tags/go"


def test_main_writes_page(tmp_path):
    data = tmp_path / "tags.csv"
    data.write_text("tag,count\ngo,10\nrust,1\n", encoding="utf-8")
    profile = tmp_path / "profile.yaml"
    profile.write_text("cloud:\n  gradations: 3\n", encoding="utf-8")
    output = tmp_path / "tags.html"

    code = main(["--input", str(data), "--profile", str(profile), "--output", str(output), "--widget", "cloud"])

    assert code == 0
    root = html.fromstring(output.read_text(encoding="utf-8"))
    assert [a.get("class") for a in root.xpath("//ul[@id='tagCloud']/li/a")] == ["weight3", "weight1"]


@pytest.mark.parametrize("profile_text", [None, "cloud:\n  gradations: 1\n"])
def test_main_reports_failures(tmp_path, profile_text):
    data = tmp_path / "tags.csv"
    data.write_text("tag,count\ngo,10\n", encoding="utf-8")
    args = ["--input", str(tmp_path / "missing.csv") if profile_text is None else str(data), "--output", str(tmp_path / "out.html")]
    if profile_text is not None:
        profile = tmp_path / "profile.yaml"
        profile.write_text(profile_text, encoding="utf-8")
        args += ["--profile", str(profile)]

    assert main(args) == 1
    assert not (tmp_path / "out.html").exists()


def test_url_generator_for_ignores_other_braces():
    generate = url_generator_for("/x/{0}/{lang}/{tag}")
    assert generate("go") == "/x/{0}/{lang}/go"


def test_main_rejects_non_object_records(tmp_path):
    data = tmp_path / "posts.json"
    data.write_text('[{"tags": ["go"]}, "rust"]', encoding="utf-8")

    assert main(["--input", str(data), "--output", str(tmp_path / "out.html")]) == 1
    assert not (tmp_path / "out.html").exists()


def test_main_with_extra_braces_in_url_pattern(tmp_path):
    data = tmp_path / "tags.csv"
    data.write_text("tag,count\ngo,10\n", encoding="utf-8")
    output = tmp_path / "tags.html"

    code = main(["--input", str(data), "--output", str(output), "--widget", "index", "--url-pattern", "/{lang}/tags/{tag}"])

    assert code == 0
    root = html.fromstring(output.read_text(encoding="utf-8"))
    assert root.xpath("//ul[@id='tagIndex']/li/a")[0].get("href").endswith("/tags/go")


def test_main_writes_log_file(tmp_path):
    data = tmp_path / "tags.csv"
    data.write_text("tag,count\ngo,10\nrust,1\n", encoding="utf-8")
    log_file = tmp_path / "logs" / "run.log"

    code = main(["--input", str(data), "--output", str(tmp_path / "tags.html"), "--log-file", str(log_file), "--verbose"])

    assert code == 0
    log_text = log_file.read_text(encoding="utf-8")
    assert "[TagLoader] Loaded 2 tags" in log_text
    assert "[DEBUG]" in log_text
    assert "[TagCloud] Rendered 2 tags" in log_text
