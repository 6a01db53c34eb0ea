import pytest

from skelforge.dom import h


@pytest.fixture
def profile_card():
    """A rendered card: avatar, title and a paragraph stacked vertically."""
    return h(
        "div",
        {"class": "card"},
        h("img", {"class": "avatar", "src": "me.png"}, box={"width": 40, "height": 40, "x": 0, "y": 0}),
        h("h1", None, "Jane Doe", box={"width": 300, "height": 32, "x": 0, "y": 50}),
        h(
            "p",
            None,
            "Writes about typography and loading states in web apps.",
            box={"width": 300, "height": 40, "x": 0, "y": 90},
            style={"display": "block", "position": "static", "fontSize": "16px"},
        ),
        box={"width": 400, "height": 200, "x": 0, "y": 0},
    )
