"""Thread Safety Example - Sharing Registries Between Threads.

Thread Safety:
    Language values are immutable. LanguageRegistry guards its mapping with
    a readers-writer lock: lookups run concurrently, registrations are
    exclusive, and a waiting registration is not starved by lookups.

Demonstrates:
1. The shared frozen registry under concurrent classification
2. Registration racing lookups in a mutable registry

Python 3.11+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from pluralengine import (
    Language,
    category_set,
    create_default_registry,
    get_shared_registry,
)
from pluralengine.rules import rule_one_integer, rule_other


def example_1_shared_registry() -> None:
    """Example 1: Classify from many threads without any setup."""
    print("=" * 60)
    print("Example 1: Shared Registry")
    print("=" * 60)

    shared = get_shared_registry()
    jobs = [(language_id, n) for language_id in ("ru", "ar", "lv") for n in range(12)]

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(lambda job: shared.classify(*job), jobs))

    for (language_id, n), category in zip(jobs, results, strict=True):
        if n < 4:
            print(f"{language_id} {n:>2} -> {category}")


def example_2_live_registration() -> None:
    """Example 2: Replace a definition while other threads look it up."""
    print("\n" + "=" * 60)
    print("Example 2: Registration During Lookups")
    print("=" * 60)

    registry = create_default_registry()
    plain = Language("en", category_set("one"), rule_one_integer, "English")
    flat = Language("en", category_set(), rule_other, "Flat English")
    stop = threading.Event()
    seen: set[str] = set()

    def reader() -> None:
        while not stop.is_set():
            seen.add(str(registry.classify("en-GB", 1)))

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for index in range(100):
        registry.register(flat if index % 2 else plain)
    stop.set()
    for thread in threads:
        thread.join()

    print(f"Categories observed: {sorted(seen)}")
    # Output: Categories observed: ['one', 'other']


if __name__ == "__main__":
    example_1_shared_registry()
    example_2_live_registration()

    print("\n" + "=" * 60)
    print("[SUCCESS] All thread safety examples complete!")
    print("=" * 60)
