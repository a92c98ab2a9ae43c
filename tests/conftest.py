"""Root test configuration: shared render context fixtures"""

import json

import pytest


def _chapter(name: str, content: str, sub_items: list = None) -> dict:
    return {"Chapter": {
        "name": name,
        "content": content,
        "number": None,
        "sub_items": sub_items or [],
        "path": f"{name.lower().replace(' ', '_')}.md",
        "source_path": f"{name.lower().replace(' ', '_')}.md",
        "parent_names": [],
    }}


SAMPLE_CONTEXT = {
    "version": "0.4.37",
    "root": "/tmp/book",
    "book": {
        "sections": [
            _chapter("Introduction", "# Intro\n\nWelcome to *the* book.\n", [
                _chapter("Getting Started", "Install with `cargo install`.\n"),
            ]),
            "Separator",
            {"PartTitle": "Reference"},
            _chapter("Usage", "```sh\nmdbook build\n```\n"),
        ],
        "__non_exhaustive": None,
    },
    "config": {
        "book": {"title": "The Book", "authors": ["Jane"]},
        "output": {"man": {}},
    },
    "destination": "/tmp/book/book/man",
}


@pytest.fixture(name="context_data")
def context_data_fixture():
    return json.loads(json.dumps(SAMPLE_CONTEXT))


@pytest.fixture(name="context_json")
def context_json_fixture(context_data):
    return json.dumps(context_data)
