"""
Demo: Keyboard-wedge scan session

Feeds a simulated keystroke burst into a ScanSession and prints the single
result produced once the burst goes quiet.
"""

from gs1_scan import ScanSession, KeyEvent, check_invisible_chars, result_to_json


def demo_scan_session():
    """Simulate a scanner typing a GS1 DataMatrix read key by key."""

    print("=" * 80)
    print("  SCAN SESSION DEMO")
    print("=" * 80)

    scan = "]d2011234567890123417250101" "10ABC123\x1d21SN0001"
    session = ScanSession(delay=0.3)

    buffer = ""
    display = ""
    future = None
    for char in scan:
        event = KeyEvent(char_code=ord(char), key=char)
        display += check_invisible_chars(event)
        buffer += "+" if char == "\x1d" else char
        future = session.handle_input(buffer)

    print(f"\nTyped:  {display}")
    print(f"Buffer: {session.buffer}")

    result = future.result(timeout=5)
    print("\nJSON Output:")
    print(result_to_json(result, near_expiry_months=6))


if __name__ == "__main__":
    demo_scan_session()
