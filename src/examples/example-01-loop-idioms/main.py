"""
Example 01: Loop Idioms

The same list walked four ways: by index, with enumerate(), directly,
and through a callback. A plain for loop is the one to reach for first.
"""

from iteration_idioms.idioms import by_enumerate, by_index, direct, for_each, mapped

users = ["John", "Jane", "Bob", "Alice"]


if __name__ == "__main__":
    print(f"by_index(users)     = {by_index(users)}")
    print(f"by_enumerate(users) = {by_enumerate(users)}")
    print(f"direct(users)       = {direct(users)}")

    print("\nfor_each() only runs the side effect:")
    for_each(users, lambda user: print(f"  {user}"))

    print("\nmapped() builds a new list, so don't use it just for side effects:")
    print(f"  {mapped(users, len)}")

    print("\n✅ All idioms visit the items in the same order!")
