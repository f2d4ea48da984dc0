"""Text rendering of the table and the fixed console messages."""

from blackjack.hand import Hand

WELCOME = "Welcome to Blackjack!\n"
PROMPT = "Do you want to hit(h) or stand(s)? "
INVALID_CHOICE = "Invalid. Please type 'h' to hit or 's' to stand."
DEALER_HITS_NOTICE = "\nDealer hits..."
HIDDEN_CARD = "?"


def render_hand(owner: str, hand: Hand) -> str:
    """Render one hand with its score."""
    return f"{owner}'s hand: {hand}  Score: {hand.value}"


def render_concealed(owner: str, hand: Hand) -> str:
    """Render a hand showing only its first card, without a score."""
    shown = str(hand.upcard) if hand.upcard is not None else HIDDEN_CARD
    return f"{owner}'s hand: [{shown}, {HIDDEN_CARD}]"


def render(player_hand: Hand, dealer_hand: Hand, hide_dealer_second_card: bool) -> str:
    """
    Render both hands, player first.

    Args:
        player_hand: Always shown in full with its score
        dealer_hand: Shown in full, or only its first card when concealed
        hide_dealer_second_card: Conceal the dealer's hole card and score

    Returns:
        The text to write, starting with a blank line
    """
    lines = ["", render_hand("Player", player_hand)]
    if hide_dealer_second_card:
        lines.append(render_concealed("Dealer", dealer_hand))
    else:
        lines.append(render_hand("Dealer", dealer_hand))
    return "\n".join(lines)
