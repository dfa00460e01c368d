from trug.assets import AssetLister
from trug.config import ProjectConfig
from trug.page import Page


def make_project(tmp_path):
    (tmp_path / "public" / "css").mkdir(parents=True)
    (tmp_path / "public" / "js").mkdir(parents=True)
    (tmp_path / "public" / "css" / "app.css").write_text("body{}", encoding="utf-8")
    (tmp_path / "public" / "js" / "app.js").write_text("1;", encoding="utf-8")
    return ProjectConfig(root=tmp_path, title="Deck")


def test_page_exposes_config_and_assets(tmp_path):
    config = make_project(tmp_path)
    page = Page(config)

    assert page.config is config
    assert page.title == "Deck"
    assert isinstance(page.assets, AssetLister)
    assert page.assets.root == tmp_path / "public"
    assert page.stylesheets == ["app.css"]
    assert page.javascripts == ["app.js"]


def test_page_assets_is_fresh_on_each_access(tmp_path):
    page = Page(make_project(tmp_path))

    assert page.assets is not page.assets
    (tmp_path / "public" / "js" / "extra.js").write_text("2;", encoding="utf-8")
    assert page.javascripts == ["app.js", "extra.js"]


def test_page_context(tmp_path):
    config = make_project(tmp_path)
    page = Page(config)
    context = page.context()

    assert set(context) == {"page", "config", "assets"}
    assert context["page"] is page
    assert context["config"] is config
    assert context["assets"].stylesheets() == ["app.css"]
    assert str(tmp_path) in repr(page)


def test_page_without_public_dir(tmp_path):
    page = Page(ProjectConfig(root=tmp_path))
    assert page.stylesheets == []
    assert page.javascripts == []
