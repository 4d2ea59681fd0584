import time
import numpy as np
from chordid.matcher import identify_chord, suggest_chord
from chordid.notes import get_all_keys

def run_benchmark():
    # Setup
    keys = np.array(get_all_keys())
    rng = np.random.default_rng(42)
    # Generate 100,000 random 2-5 note inputs
    inputs = [list(keys[rng.integers(0, 12, size=rng.integers(2, 6))]) for _ in range(100000)]

    # Pre-warm template vector cache
    suggest_chord(inputs[0])

    for name, fn in (("identify_chord", identify_chord), ("suggest_chord", suggest_chord)):
        start_time = time.perf_counter()
        for notes in inputs:
            fn(notes)
        end_time = time.perf_counter()

        duration = end_time - start_time
        print(f"{name}: {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
