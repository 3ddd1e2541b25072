import dataclasses

import pytest

from skicalc import (
    Application,
    Constant,
    Identity,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    SkiTypeError,
    Substitutor,
    I,
    K,
    S,
    apply,
)
from skicalc.evaluation.apply import contract


def test_primitives_compare_structurally():
    assert Identity() == I
    assert Constant() == K
    assert Substitutor() == S
    assert I != K
    assert K != S
    assert hash(Identity()) == hash(I)


def test_apply_is_lazy():
    t = apply(I, K)
    assert isinstance(t, Application)
    assert t.function == I
    assert t.argument == K


def test_call_sugar_builds_applications():
    assert S(K)(S)(K) == apply(apply(apply(S, K), S), K)


def test_apply_rejects_non_terms():
    with pytest.raises(SkiTypeError):
        apply(I, "K")
    with pytest.raises(SkiTypeError):
        apply(42, K)


def test_terms_are_immutable():
    t = PartialConstant(I)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.held = K


def test_equal_construction_paths_give_equal_terms():
    a = apply(apply(S, I), apply(K, I))
    b = apply(apply(S, I), apply(K, I))
    assert a == b
    assert hash(a) == hash(b)
    assert a is not b


@pytest.mark.parametrize(
    "function,argument,expected",
    [
        (I, K, K),
        (K, S, PartialConstant(S)),
        (PartialConstant(S), I, S),
        (S, K, PartialSubstitutor1(K)),
        (PartialSubstitutor1(K), S, PartialSubstitutor2(K, S)),
    ],
)
def test_structural_rules(function, argument, expected):
    assert contract(function, argument) == expected


def test_distribution_and_application_are_not_structural():
    assert contract(PartialSubstitutor2(K, K), I) is None
    assert contract(apply(I, I), I) is None


def test_partial_constant_discards_argument():
    held = PartialSubstitutor2(K, S)
    for argument in (I, K, S, PartialConstant(I)):
        assert contract(PartialConstant(held), argument) is held


@pytest.mark.parametrize(
    "term,text",
    [
        (I, "I"),
        (apply(I, K), "IK"),
        (apply(apply(apply(S, K), S), K), "SKSK"),
        (apply(apply(apply(S, I), I), apply(apply(S, I), I)), "SII(SII)"),
        (PartialConstant(I), "KI"),
        (PartialSubstitutor2(PartialConstant(S), K), "S(KS)K"),
        (apply(S, apply(apply(S, apply(K, S)), K)), "S(S(KS)K)"),
    ],
)
def test_notation(term, text):
    assert str(term) == text


def test_debug_repr():
    assert repr(I) == "Identity"
    assert repr(PartialSubstitutor2(PartialConstant(S), K)) == \
        "PartialSubstitutor2(PartialConstant(Substitutor), Constant)"
    assert repr(apply(I, K)) == "Application(Identity, Constant)"


def test_payload_order():
    assert I.payload == ()
    assert PartialSubstitutor2(K, S).payload == (K, S)
    assert apply(S, I).payload == (S, I)


def test_resolved_flag_tracks_nested_applications():
    assert I.is_resolved
    assert PartialSubstitutor2(K, PartialConstant(S)).is_resolved
    assert not apply(I, K).is_resolved
    assert not PartialSubstitutor1(PartialConstant(apply(I, K))).is_resolved


def test_notation_and_debug_repr():
    t = PartialSubstitutor2(PartialConstant(I), apply(S, apply(K, I)))
    assert str(t) == "S(KI)(S(KI))"
    assert repr(t) == "PartialSubstitutor2(PartialConstant(Identity), Application(Substitutor, Application(Constant, Identity)))"


def test_terms_are_not_equal_to_other_values():
    assert I != "I"
    assert PartialConstant(I) != (I,)
