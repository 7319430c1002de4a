#!/usr/bin/env python3
"""
Start a video generation task through the relay and poll until it finishes.

Usage:
    python run_client.py "a cat surfing" https://example.com/cat.png [resolution]
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from seedance_relay.client import VideoRelayClient, PollingTimeout, RelayRequestError


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(2)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    prompt, image_url = sys.argv[1], sys.argv[2]
    resolution = sys.argv[3] if len(sys.argv) > 3 else None

    with VideoRelayClient() as client:
        try:
            task_id = client.create_video(prompt, image_url, resolution)
            result = client.wait_for_completion(task_id)
        except (RelayRequestError, PollingTimeout) as e:
            print(f"Error: {e}")
            sys.exit(1)

    if result["status"] == "succeeded":
        print(f"Video ready: {result['output_url']}")
    else:
        print(f"Task {result['status']}: {result.get('error')}")
        sys.exit(1)
