from __future__ import annotations

import random
import re

from simplemail.tokens import gen_boundary, gen_id


def test_boundary_is_35_lowercase_hex():
    assert re.fullmatch(r"[0-9a-f]{35}", gen_boundary())


def test_id_is_32_uppercase_hex():
    assert re.fullmatch(r"[0-9A-F]{32}", gen_id())


def test_injected_rng_is_deterministic():
    assert gen_boundary(random.Random(42)) == gen_boundary(random.Random(42))
    assert gen_id(random.Random(42)) == gen_id(random.Random(42))


def test_consecutive_draws_differ():
    rng = random.Random(0)
    assert gen_boundary(rng) != gen_boundary(rng)
