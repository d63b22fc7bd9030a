import pathlib


def run_file(path):
    content = pathlib.Path(path).read_text()
    namespace = {}
    exec(content, namespace)
    return namespace


EXAMPLES_DIR = pathlib.Path(__file__).parents[1].joinpath("examples")


def test_user():
    result = run_file(EXAMPLES_DIR / "user.py")
    assert result["user"].name == "Ezio Auditore"
    assert result["before_promotion"] is False
    assert result["after_promotion"] is True


def test_prefixed_fields():
    result = run_file(EXAMPLES_DIR / "prefixed_fields.py")
    assert result["result"] == ("Foo-Thing", "Bar-Thingy")
