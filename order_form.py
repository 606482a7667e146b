import logging
import os
import re
from typing import List, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

from order_state import Crust, OrderForm, Size, Topping, TOPPING_PRICE, format_money
from pricing import ValidationError, price

logger = logging.getLogger(__name__)

FALSE_VALUES = {"0", "false", "no", "off"}
NEGATIONS = ["remove", "no", "without"]


def env_flag(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in FALSE_VALUES


def log_level(name: str) -> Optional[int]:
    """Numeric level for a level name such as 'debug', or None if logging doesn't know it."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
CONFIRM_QUIT = env_flag("CONFIRM_QUIT")

QUIT_PROMPT = "Are you sure you want to quit? (y/n) "

# Global form state, reset by the clear command
current_form = OrderForm()


def _stem(word: str) -> str:
    # onions -> onion, olives -> olive
    if len(word) > 3 and word.endswith("s"):
        return word[:-1]
    return word


def _normalize(text: str) -> str:
    words = re.findall(r"[a-z]+", text.lower())
    return " " + " ".join(_stem(w) for w in words) + " "


def _mentions(normalized: str, label: str) -> bool:
    return _normalize(label) in normalized


def _has_word(normalized: str, words) -> bool:
    return any(_normalize(w) in normalized for w in words)


def find_crust(user_input: str):
    normalized = _normalize(user_input)
    for crust in Crust:
        if _mentions(normalized, crust.label):
            return crust
    return None


def find_size(user_input: str):
    normalized = _normalize(user_input)
    for size in Size:
        if _mentions(normalized, size.label):
            return size
    return None


def _toppings_in(normalized: str) -> List[Topping]:
    return [t for t in Topping if _mentions(normalized, t.label)]


def find_toppings(user_input: str) -> List[Topping]:
    return _toppings_in(_normalize(user_input))


def split_negation(user_input: str) -> Tuple[str, str]:
    """Split a line at its first negation word: (text to add from, text to remove from)."""
    normalized = _normalize(user_input)
    positions = [normalized.find(_normalize(w)) for w in NEGATIONS]
    positions = [p for p in positions if p != -1]
    if not positions:
        return normalized, " "
    cut = min(positions)
    return normalized[:cut] + " ", normalized[cut:]


def get_intent(user_input: str) -> str:
    """Very simple keyword-based intent recognizer.
    Returns one of: 'quit', 'clear', 'select', 'order', 'show', 'help', 'fallback'.
    """
    normalized = _normalize(user_input)
    if _has_word(normalized, ["quit", "exit"]):
        return 'quit'
    if _has_word(normalized, ["clear", "reset", "start over"]):
        return 'clear'
    if find_crust(user_input) or find_size(user_input) or find_toppings(user_input):
        return 'select'
    if _has_word(normalized, ["order", "checkout", "receipt", "total", "done"]):
        return 'order'
    if _has_word(normalized, ["show", "status", "current"]):
        return 'show'
    if _has_word(normalized, ["help", "menu", "options"]):
        return 'help'
    return 'fallback'


def handle_selection(user_input: str, form: Optional[OrderForm] = None) -> str:
    form = form or current_form
    crust = find_crust(user_input)
    if crust:
        form.select_crust(crust)
    size = find_size(user_input)
    if size:
        form.select_size(size)
    # "pepperoni, no olives": toppings after the negation word are dropped
    wanted, unwanted = split_negation(user_input)
    form.add_toppings(_toppings_in(wanted))
    form.remove_toppings(_toppings_in(unwanted))
    logger.debug("Selection updated from %r: %s", user_input, form.describe())
    return f"Got it. {form.describe()}"


def handle_order(user_input: str = "", form: Optional[OrderForm] = None) -> str:
    form = form or current_form
    selection = form.selection()
    try:
        receipt = price(selection)
    except ValidationError as e:
        logger.info("Order rejected: %s", e)
        return str(e)
    form.receipt = receipt
    logger.info("Order placed: %s total", format_money(receipt.total))
    return receipt.summary()


def handle_clear(user_input: str = "", form: Optional[OrderForm] = None) -> str:
    form = form or current_form
    form.clear()
    logger.debug("Form cleared")
    return f"Order cleared. {form.describe()}"


def handle_show(user_input: str = "", form: Optional[OrderForm] = None) -> str:
    form = form or current_form
    return form.describe()


def handle_help(user_input: str = "") -> str:
    sizes = ", ".join(f"{s.label} ({format_money(s.base_price)})" for s in Size)
    crusts = ", ".join(c.label for c in Crust)
    toppings = ", ".join(t.label for t in Topping)
    return (
        f"Sizes: {sizes}\n"
        f"Crusts: {crusts}\n"
        f"Toppings ({format_money(TOPPING_PRICE)} each): {toppings}\n"
        "Name a size, crust or toppings to choose them (say 'remove' to drop a topping), "
        "then type 'order' for your receipt. 'clear' starts over, 'quit' exits."
    )


def handle_fallback(user_input: str = "") -> str:
    return "Sorry, I didn't catch that. Type 'help' to see what you can order."


def confirm_quit() -> bool:
    if not CONFIRM_QUIT:
        return True
    try:
        answer = input(QUIT_PROMPT)
    except EOFError:
        return True
    return answer.strip().lower() in {"y", "yes"}


def form_loop(form: Optional[OrderForm] = None):
    form = form or current_form
    print("Pizza Order Form ready! Type 'help' for options, 'quit' to exit.")
    while True:
        try:
            user_input = input("You: ")
        except EOFError:
            break

        intent = get_intent(user_input)
        if intent == 'quit':
            if confirm_quit():
                break
            continue

        if intent == 'clear':
            reply = handle_clear(user_input, form)
        elif intent == 'select':
            reply = handle_selection(user_input, form)
        elif intent == 'order':
            reply = handle_order(user_input, form)
        elif intent == 'show':
            reply = handle_show(user_input, form)
        elif intent == 'help':
            reply = handle_help(user_input)
        else:
            reply = handle_fallback(user_input)
        print(reply)
    print("Goodbye!")


def main():
    level = log_level(LOG_LEVEL)
    logging.basicConfig(
        level=level if level is not None else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        logger.warning("Unknown LOG_LEVEL %r, using WARNING", LOG_LEVEL)
    form_loop()


if __name__ == "__main__":
    main()
