"""Layered redirects — static defaults under YAML under JSON.

Each layer shadows the ones registered before it. Paths that no layer
maps fall through to the greeting.

Run:
    python app.py
"""

from pathlib import Path

from waypoint import App

HERE = Path(__file__).parent

app = App()
app.add_routes(
    {
        "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
        "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
    },
    name="<defaults>",
)
app.add_yaml_file(HERE / "routes.yml")
app.add_json_file(HERE / "routes.json")


if __name__ == "__main__":
    app.run()
