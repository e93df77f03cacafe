import gettext

from .i18n import DOMAIN, bind_domain, default_locale_dir


def test_bind_domain_default(monkeypatch):
    monkeypatch.delenv("MAPGRAPH_LOCALE_DIR", raising=False)
    assert bind_domain() == default_locale_dir
    assert gettext.textdomain() == DOMAIN


def test_bind_domain_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MAPGRAPH_LOCALE_DIR", str(tmp_path))
    assert bind_domain() == tmp_path
    assert gettext.bindtextdomain(DOMAIN) == str(tmp_path)
    bind_domain(default_locale_dir)


def test_untranslated_strings_pass_through(tmp_path):
    bind_domain(tmp_path)
    assert gettext.gettext("Starting") == "Starting"
    bind_domain(default_locale_dir)
