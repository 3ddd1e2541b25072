import threading

import pytest

from skicalc import (
    MalformedApplication,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    Realized,
    SkiTypeError,
    I,
    K,
    S,
    apply,
    realize,
    reduce,
)


@pytest.mark.parametrize(
    "term,tag",
    [
        (I, "Identity"),
        (K, "Constant"),
        (S, "Substitutor"),
        (PartialConstant(I), "PartialConstant"),
        (PartialSubstitutor1(K), "PartialSubstitutor1"),
        (PartialSubstitutor2(K, S), "PartialSubstitutor2"),
    ],
)
def test_tags(term, tag):
    assert realize(term).tag == tag


def test_primitives_have_no_parts():
    assert realize(K).parts == ()


def test_parts_are_realized_recursively():
    value = realize(PartialSubstitutor2(PartialConstant(S), K))
    first, second = value.parts
    assert isinstance(first, Realized)
    assert first.tag == "PartialConstant"
    assert first.parts[0].tag == "Substitutor"
    assert second.tag == "Constant"


def test_debug_string():
    value = realize(reduce(apply(S, apply(apply(S, apply(K, S)), K))))
    assert repr(value) == "PartialSubstitutor1(PartialSubstitutor2(PartialConstant(Substitutor), Constant))"
    assert str(value) == "S(S(KS)K)"


def test_realize_is_idempotent():
    value = realize(PartialConstant(I))
    assert realize(value) is value
    assert realize(realize(value)) == value


def test_equal_terms_realize_to_the_same_value():
    a = realize(PartialSubstitutor2(K, PartialConstant(I)))
    b = realize(PartialSubstitutor2(K, PartialConstant(I)))
    assert a is b


def test_realized_term_round_trips():
    t = PartialSubstitutor1(PartialConstant(K))
    assert realize(t).term == t


def test_unreduced_application_is_malformed():
    with pytest.raises(MalformedApplication):
        realize(apply(I, K))


def test_nested_unreduced_application_is_malformed():
    with pytest.raises(MalformedApplication):
        realize(PartialSubstitutor2(K, PartialConstant(apply(K, I))))


def test_non_terms_are_rejected():
    with pytest.raises(SkiTypeError):
        realize("K")


def test_realization_does_not_touch_reduction():
    term = apply(apply(apply(S, K), S), K)
    before = reduce(term)
    realize(before)
    assert reduce(term) == before


def test_concurrent_realization_yields_one_value():
    term = PartialSubstitutor2(PartialConstant(S), PartialConstant(K))
    results = []

    def worker():
        results.append(realize(PartialSubstitutor2(PartialConstant(S), PartialConstant(K))))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    keep = realize(term)
    assert all(r == keep for r in results)
