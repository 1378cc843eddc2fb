#!/usr/bin/env python3
"""
Train small networks on logic-gate truth tables.

Usage:
    python scripts/train_gates.py [gate] [repetitions] [learn_rate]

The script will:
1. Train a sigmoid network on the chosen truth table (default: or)
2. Print the final predictions next to the expected labels
3. Write a PNG with the cost and accuracy curves next to this script
"""

import os
import sys
import base64

from feedforward.config import configure_logging
from feedforward.gates import TRUTH_TABLES, train_gate
from feedforward.reporting import create_history_image


def main():
    """Main training function."""
    configure_logging()

    gate = sys.argv[1] if len(sys.argv) > 1 else 'or'
    repetitions = int(sys.argv[2]) if len(sys.argv) > 2 else 1000
    learn_rate = float(sys.argv[3]) if len(sys.argv) > 3 else 0.5
    hidden = (3,) if gate == 'xor' else ()

    if gate not in TRUTH_TABLES:
        print(f"❌ Unknown gate '{gate}'. Choose one of: {', '.join(TRUTH_TABLES)}")
        sys.exit(1)

    if repetitions < 1:
        print(f"❌ Repetitions must be at least 1, got {repetitions}")
        sys.exit(1)

    print("=" * 60)
    print(f"Training '{gate}' for {repetitions} repetition(s), rate {learn_rate}")
    print("=" * 60)

    net, history = train_gate(gate, repetitions, learn_rate, hidden_widths=hidden, seed=0)

    print(f"\n✅ Final cost: {history[-1]['cost']:.6f}")
    print(f"   Correct: {history[-1]['correct']} of {history[-1]['total']}")

    print("\n📝 Predictions:")
    inputs, labels = TRUTH_TABLES[gate]
    for x, label in zip(inputs, labels):
        output = net.compute(x)
        print(f"   {x} -> {output[0]:.4f} (expected {label[0]})")

    image_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), f'{gate}_history.png')
    with open(image_path, 'wb') as f:
        f.write(base64.b64decode(create_history_image(history, title=f"{gate} gate")))
    print(f"\n📁 History plot: {image_path}")


if __name__ == '__main__':
    main()
