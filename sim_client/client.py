import os
import requests
from pathlib import Path
from sim_client.utils.pretty_display import print_info, print_error, print_border, print_startup_message, print_stats
from sim_client.utils.animations import animate_opening

SERVER_URL = os.getenv("SIM_SERVER_URL", "http://127.0.0.1:8000")
DECKLIST_FILE = Path(os.getenv("DECKLIST_FILE", "decklist.txt"))


class SimClient:
    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.last_result = None  # replaced on every opening

    def _request(self, method: str, path: str, **kwargs) -> dict:
        """Send a request; connection problems come back as an `error` dict."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            return {"error": f"Could not reach {url}: {e}"}
        try:
            return response.json()
        except ValueError:
            return {"error": f"Unexpected response ({response.status_code}) from {url}"}

    def open_box(self):
        """Open a 24-pack box."""
        result = self._request("POST", "/open_box")
        if "cards" in result:
            self.last_result = result
        return result

    def open_prerelease(self):
        """Open the 6 prerelease packs."""
        result = self._request("POST", "/open_prerelease")
        if "cards" in result:
            self.last_result = result
        return result

    def get_card_pool(self):
        return self._request("GET", "/card_pool")

    def get_decklist(self, card_ids: list):
        return self._request("POST", "/decklist", json={"card_ids": card_ids})


def save_decklist(client: SimClient, path: Path = DECKLIST_FILE) -> bool:
    """Export the last opening as a decklist file and report how it went."""
    if not client.last_result or not client.last_result.get("cards"):
        print_info("Open some packs first!")
        return False

    card_ids = [card["id"] for card in client.last_result["cards"]]
    response = client.get_decklist(card_ids)
    if "error" in response:
        print_error(response["error"])
        return False

    try:
        path.write_text(response["decklist"] + "\n", encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write decklist: {e}")
        return False

    print_info(f"Decklist saved to {path} ({response['lines']} lines)")
    return True


def show_opening(response: dict):
    if "error" in response:
        print_error(response["error"])
        return
    print_border()
    print(f"Opened {response['total']} cards!")
    print_border()
    animate_opening(response["cards"], response.get("title", "Pool"), terminal_width=50)
    print_stats(response["stats"], response["total"])


def show_card_pool(response: dict):
    if "error" in response:
        print_error(response["error"])
        return
    print_border()
    print(f"Catalog: {response['catalog_size']} cards, {response['pool_size']} in OP14/EB04")
    for tier, count in response["tiers"].items():
        print(f"  {tier:<13} {count}")
    print_border()


def main():
    print_startup_message()
    client = SimClient(SERVER_URL)

    while True:
        switch_case = {
            '1': 'Open 24 packs (full box)',
            '2': 'Simulate prerelease (6 packs)',
            '3': 'Show last result statistics',
            '4': 'Save decklist',
            '5': 'Show card pool',
            '6': 'Exit'
        }
        print("\nOptions:")
        for key, value in switch_case.items():
            print(f"{key}. {value}")
        choice = input(f"Enter choice (1-{len(switch_case)}): ")

        match choice:
            case '1':
                show_opening(client.open_box())
            case '2':
                show_opening(client.open_prerelease())
            case '3':
                if client.last_result:
                    print_stats(client.last_result["stats"], client.last_result["total"])
                else:
                    print_info("Nothing opened yet.")
            case '4':
                save_decklist(client)
            case '5':
                show_card_pool(client.get_card_pool())
            case '6':
                print("Goodbye!")
                return
            case _:
                print("Invalid selection.")


if __name__ == "__main__":
    main()
