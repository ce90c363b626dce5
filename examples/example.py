"""Vessel Status Checker: example usage of VesselStatusTracker."""

import logging
import sys
from pathlib import Path

import pandas as pd

# Add src to path so we can import pilottrack
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pilottrack.vessel_tracker import VesselStatusTracker
from pilottrack.pilotage_client import PilotageRetrievalError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_vessel_status(tracker: VesselStatusTracker, imo: str) -> bool:
    """
    Fetch and display the recent pilotage status of a vessel.

    Args:
        tracker: Tracker used for the lookup.
        imo: Vessel IMO number (e.g., "9074729")

    Returns:
        True if the lookup succeeded.
    """
    print(f"\n{'='*70}")
    print(f"Fetching pilotage data for IMO: {imo}")
    print(f"{'='*70}\n")

    try:
        rows = tracker.lookup(imo)
    except ValueError as e:
        print(f"Error: {e}")
        return False
    except PilotageRetrievalError as e:
        print(f"Error: {e}")
        return False

    if not rows:
        print("No data to display. Enter a valid IMO to search.")
        return True

    frame = tracker.to_frame(rows)
    with pd.option_context("display.max_colwidth", None, "display.width", 200):
        print(frame.to_string(index=False))

    print("\n" + "=" * 70 + "\n")
    return True


def interactive_mode():
    """
    Run in interactive mode, allowing user to query multiple vessels.
    """
    print("Vessel Status Checker - Interactive Mode")
    print("Enter a vessel IMO number to see its pilotage status")
    print("(Type 'quit' to exit)\n")

    tracker = VesselStatusTracker()

    while True:
        try:
            user_input = input("Enter Vessel IMO (or 'quit'): ").strip()

            if user_input.lower() in ["quit", "q", "exit"]:
                print("Goodbye!")
                break

            if not user_input:
                continue

            print_vessel_status(tracker, user_input)

        except KeyboardInterrupt:
            print("\n\nGoodbye!")
            break
        except Exception as e:
            logger.error(f"Error: {e}", exc_info=True)
            print(f"Error: {e}")

    tracker.cleanup()


if __name__ == "__main__":
    if len(sys.argv) > 1:
        # Command line mode: pass IMO number as argument
        ok = print_vessel_status(VesselStatusTracker(), sys.argv[1])
        sys.exit(0 if ok else 1)
    else:
        interactive_mode()
