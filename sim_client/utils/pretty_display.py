# pretty print display stuff

def print_info(message: str):
    print(f"[INFO]: {message}")

def print_error(message: str):
    print(f"[ERROR]: {message}")

def print_border():
    print("=" * 40)
    print()

def print_startup_message():
    print_border()
    print("Prerelease Sim - OP14 / EB04")
    print("Open a full box or a prerelease kit and export the pull as a decklist.")
    print_border()

def print_stats(stats: dict, total: int):
    print_border()
    print(f"Cards: {total}")
    print(f"Hits (AA/SEC/SP): {stats.get('hits', 0)}")
    print(f"SRs: {stats.get('srs', 0)}")
    print_border()
