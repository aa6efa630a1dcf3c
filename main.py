"""Simple entrypoint to run the wardrobe sanctuary engine locally."""

import json

from evaluation.scenarios import SCENARIOS
from sanctuary_app.app import SanctuaryApp


def main() -> None:
    app = SanctuaryApp()
    wardrobe = SCENARIOS[0].wardrobe_items
    print(json.dumps(app.recommend(wardrobe, "Elegant & Refined"), indent=2))
    print(json.dumps(app.insights(wardrobe), indent=2))


if __name__ == "__main__":
    main()
