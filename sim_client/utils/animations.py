import random
import sys
import re
from time import sleep

RED = '\033[31m'
GREEN = '\033[32m'
CYAN = '\033[36m'
MAGENTA = '\033[35m'
YELLOW = '\033[33m'
WHITE = '\033[37m'
BOLD = '\033[1m'
RESET = '\033[0m'
CLEAR_LINE = '\033[2K'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

RARITY_COLORS = {
    'C': WHITE,
    'UC': GREEN,
    'R': CYAN,
    'L': RED,
    'SR': MAGENTA,
    'SEC': YELLOW,
    'TR': YELLOW,
    'SP': YELLOW,
}

ansi_escape = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')

def card_label(card: dict) -> str:
    return f"{card['id']} {card.get('name', '')}".strip()

def card_color(card: dict) -> str:
    # parallels are magenta whatever their printed rarity
    if '_p' in card['id'] or card['id'].endswith('*'):
        return MAGENTA
    return RARITY_COLORS.get(card.get('rarity', 'C'), WHITE)

def visible_slice(s, start, length):
    """Slice string by visible character positions, preserving ANSI codes."""
    result = []
    visible_pos = 0
    i = 0

    while i < len(s) and (visible_pos < start + length):
        if s[i] == '\033':
            j = i + 1
            while j < len(s) and not s[j].isalpha():
                j += 1
            j += 1
            escape_seq = s[i:j]
            if visible_pos >= start:
                result.append(escape_seq)
            i = j
        else:
            if start <= visible_pos < start + length:
                result.append(s[i])
            visible_pos += 1
            i += 1

    return ''.join(result)

def ticker_line(terminal_width=50):
    return RESET + "=" * (terminal_width//2 - 1) + RED + "|" + RESET + "=" * (terminal_width//2 - 1)

def generate_spinner_cards(card_pool: list[dict], chosen: dict, count=30) -> list[str]:
    """Colored labels for one spinner, with the chosen card placed past the midpoint."""
    result = []
    for _ in range(count):
        card = random.choice(card_pool)
        result.append(f"{card_color(card)}{card_label(card)}{RESET}")
    result.insert(random.randint(count // 2, count), f"{card_color(chosen)}{card_label(chosen)}{RESET}")
    return result

def prepare_spinner_data(text: list[str], chosen_label: str, terminal_width=50):
    text_str = " ".join(text) + " "
    plain_text = ansi_escape.sub('', text_str)
    chosen_pos = plain_text.find(chosen_label)

    if chosen_pos == -1:
        chosen_pos = len(plain_text) // 2

    ticker_pos = int(terminal_width * 0.5)
    stop_pos = chosen_pos - ticker_pos + len(chosen_label) // 2

    min_scroll = terminal_width * 2
    if stop_pos < min_scroll:
        text_str = text_str * 5
        plain_text = ansi_escape.sub('', text_str)
        chosen_pos = plain_text.find(chosen_label, min_scroll)
        stop_pos = chosen_pos - ticker_pos + len(chosen_label) // 2

    return {
        'cyclic_text': text_str * 5,
        'stop_pos': max(stop_pos, 1),
        'chosen_card': chosen_label
    }

def multi_spinner(spinner_data: list[dict], terminal_width=50, base_delay=0.01, max_delay=0.15):
    """Run multiple spinners simultaneously."""
    max_frames = max(data['stop_pos'] for data in spinner_data)
    total_lines = len(spinner_data) * 2

    print(HIDE_CURSOR, end='')

    try:
        for frame in range(max_frames):
            progress = frame / max_frames
            current_delay = base_delay + (max_delay - base_delay) * progress

            output_lines = []
            for data in spinner_data:
                spinner_frame = min(frame, data['stop_pos'] - 1)
                display = visible_slice(data['cyclic_text'], spinner_frame, terminal_width)
                output_lines.append(ticker_line(terminal_width))
                output_lines.append(display)

            if frame > 0:
                sys.stdout.write(f'\033[{total_lines}A')

            for line in output_lines:
                sys.stdout.write(f'{CLEAR_LINE}{line}\n')

            sys.stdout.flush()
            sleep(current_delay)

        print()

    finally:
        print(SHOW_CURSOR, end='')

def print_cards(cards: list[dict], title: str):
    """List the cards sorted by id, one colored line each."""
    print(f"\n{BOLD}{title} ({len(cards)}){RESET}")
    for card in sorted(cards, key=lambda c: c['id']):
        star = '*' if card.get('shiny') else ' '
        print(f"  {card_color(card)}{star}[{card.get('rarity', '?'):>3}] {card_label(card)}{RESET}")

def animate_opening(cards: list[dict], title: str, terminal_width=50, base_delay=0.01, max_delay=0.12):
    """
    Spin a ticker for every shiny card in the result, then list everything.

    Args:
        cards: card dicts from the API response ('id', 'name', 'rarity', 'shiny')
        title: heading printed above the full list
    """
    if not cards:
        print("No cards to display!")
        return

    hits = [card for card in cards if card.get('shiny')]
    if hits:
        spinner_data = []
        for card in hits:
            spinner_cards = generate_spinner_cards(cards, card, count=30)
            spinner_data.append(prepare_spinner_data(spinner_cards, card_label(card), terminal_width))
        multi_spinner(spinner_data, terminal_width, base_delay, max_delay)

        print(f"\n{BOLD}You pulled: {RESET}")
        for card in hits:
            print(f"  {card_color(card)}[{card['rarity']}] {card_label(card)}{RESET}")

    print_cards(cards, title)
