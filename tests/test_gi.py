"""Tests for the Graph Isomorphism proof."""

import pytest

from zkgraph import (
    Graph,
    MissingWitnessError,
    PermutationSampler,
    RoundRunner,
    SeededRandomSource,
    gi,
    verify_isomorphism,
)


def isomorphic_pair(randomness, n: int = 6):
    """Return (g0, g1, witness) with g1 == g0.apply_permutation(witness)."""
    g0 = Graph(n, [(i, (i + 1) % n) for i in range(n)] + [(0, n // 2)])
    witness = PermutationSampler(randomness).sample(n)
    return g0, g0.apply_permutation(witness), witness


def play(g0, g1, prover, seed):
    verifier = gi.create_verifier(g0, g1, SeededRandomSource(seed))
    return gi.run_round(prover, verifier)


class MalformedProver:
    """Commits G0 honestly but answers with something that is not a permutation."""

    def __init__(self, g0, g1, randomness):
        self.g0 = g0

    def commit(self):
        return gi.Commitment(graph=self.g0)

    def respond(self, challenge):
        return gi.Response(permutation=None)


class TestHonestProver:
    """Tests for HonestProver."""

    def test_missing_witness(self, path4):
        with pytest.raises(MissingWitnessError):
            gi.HonestProver(path4, path4, None, SeededRandomSource(1))

    def test_invalid_witness(self, path4, cycle4):
        with pytest.raises(MissingWitnessError):
            gi.HonestProver(path4, cycle4, (0, 1, 2, 3), SeededRandomSource(1))

    def test_malformed_witness(self, path4):
        with pytest.raises(MissingWitnessError):
            gi.HonestProver(path4, path4, (0, 1), SeededRandomSource(1))

    def test_commitment_is_relabeling_of_g0(self, randomness):
        g0, g1, witness = isomorphic_pair(randomness)
        prover = gi.HonestProver(g0, g1, witness, randomness)
        commitment = prover.commit()
        assert commitment.graph.vertex_count == g0.vertex_count
        assert commitment.graph.edge_count == g0.edge_count

    def test_responds_to_both_challenges(self, randomness):
        """The honest response maps G_b onto H for either bit."""
        g0, g1, witness = isomorphic_pair(randomness)
        for bit in (0, 1):
            prover = gi.HonestProver(g0, g1, witness, randomness)
            h = prover.commit().graph
            q = prover.respond(gi.Challenge(bit=bit)).permutation
            gb = g1 if bit else g0
            assert verify_isomorphism(gb, h, q)

    def test_respond_before_commit(self, randomness):
        g0, g1, witness = isomorphic_pair(randomness)
        prover = gi.HonestProver(g0, g1, witness, randomness)
        with pytest.raises(RuntimeError):
            prover.respond(gi.Challenge(bit=0))

    def test_single_response_per_commitment(self, randomness):
        """Answering twice for one H would reveal the witness."""
        g0, g1, witness = isomorphic_pair(randomness)
        prover = gi.HonestProver(g0, g1, witness, randomness)
        prover.commit()
        prover.respond(gi.Challenge(bit=0))
        with pytest.raises(RuntimeError):
            prover.respond(gi.Challenge(bit=1))

    def test_fresh_permutation_each_round(self, randomness):
        g0, g1, witness = isomorphic_pair(randomness, n=8)
        prover = gi.HonestProver(g0, g1, witness, randomness)
        commitments = {prover.commit().graph for _ in range(10)}
        # 10 draws out of 8! / |Aut| relabelings; repeats are very unlikely
        assert len(commitments) > 5


class TestRound:
    """Tests for a full GI round."""

    def test_completeness(self, randomness):
        g0, g1, witness = isomorphic_pair(randomness)
        for seed in range(50):
            prover = gi.create_prover(g0, g1, witness, randomness.fork(seed))
            accepted, _ = play(g0, g1, prover, seed)
            assert accepted

    def test_triangle_scenario(self, triangle_plus_isolated):
        witness = (1, 2, 0, 3)
        g1 = triangle_plus_isolated.apply_permutation(witness)
        prover = gi.create_prover(triangle_plus_isolated, g1, witness, SeededRandomSource(5))
        accepted, _ = play(triangle_plus_isolated, g1, prover, 6)
        assert accepted

    def test_transcript(self, randomness):
        g0, g1, witness = isomorphic_pair(randomness)
        prover = gi.create_prover(g0, g1, witness, randomness)
        accepted, transcript = play(g0, g1, prover, 9)
        assert len(transcript) == 2
        assert transcript.protocol == gi.NAME
        assert isinstance(transcript.first, gi.Commitment)
        assert isinstance(transcript.response, gi.Response)
        assert transcript.coin in (0, 1)
        assert transcript.messages == (transcript.first, transcript.response)

    def test_challenge_one_response_is_permutation(self, randomness):
        """For b = 1 the response is sigma after w^-1, a valid permutation."""
        g0, g1, witness = isomorphic_pair(randomness, n=8)
        prover = gi.HonestProver(g0, g1, witness, randomness)
        prover.commit()
        q = prover.respond(gi.Challenge(bit=1)).permutation
        assert sorted(q) == list(range(8))

    def test_garbage_response_rejected(self, path4):
        verifier = gi.Verifier(path4, path4, SeededRandomSource(1))
        verifier.challenge(gi.Commitment(graph=path4))
        assert not verifier.decide(gi.Response(permutation=(0, 0, 0, 0)))

    def test_non_sequence_response_rejected(self, path4, cycle4):
        """A response that is not a permutation at all is still a rejection."""
        for seed in range(20):
            prover = MalformedProver(path4, cycle4, SeededRandomSource(seed))
            accepted, transcript = play(path4, cycle4, prover, seed)
            assert not accepted
            assert transcript.response.permutation is None

    def test_non_graph_commitment_rejected(self, path4):
        verifier = gi.Verifier(path4, path4, SeededRandomSource(1))
        verifier.challenge(gi.Commitment(graph=None))
        assert not verifier.decide(gi.Response(permutation=(0, 1, 2, 3)))

    def test_runner_rejects_malformed_prover(self, path4, cycle4):
        runner = RoundRunner(randomness=SeededRandomSource(1))
        assert not runner.run(gi, path4, cycle4, rounds=3, prover_factory=MalformedProver)


class TestCheatingProver:
    """Soundness against a prover without a witness."""

    def test_rejected_about_half_the_time(self, randomness, path4, cycle4):
        rounds = 2000
        accepted = 0
        for i in range(rounds):
            prover = gi.CheatingProver(path4, cycle4, randomness.fork(2 * i))
            ok, _ = play(path4, cycle4, prover, randomness.fork(2 * i + 1).seed)
            accepted += ok
        # Mean 1000, std ~22
        assert accepted / rounds <= 0.5 + 0.06
        assert accepted > 0

    def test_accepted_only_when_bet_matches(self, randomness, path4, cycle4):
        for i in range(100):
            prover = gi.CheatingProver(path4, cycle4, randomness.fork(i))
            verifier = gi.Verifier(path4, cycle4, randomness.fork(1000 + i))
            accepted, transcript = gi.run_round(prover, verifier)
            assert accepted == (transcript.coin == prover.predicted_challenge)

    def test_invalid_bias(self, randomness, path4, cycle4):
        with pytest.raises(ValueError):
            gi.CheatingProver(path4, cycle4, randomness, p_one=-0.1)

    def test_fixed_bet(self, randomness, path4, cycle4):
        for p_one, bet in ((0.0, 0), (1.0, 1)):
            prover = gi.CheatingProver(path4, cycle4, randomness, p_one=p_one)
            for _ in range(20):
                h = prover.commit().graph
                assert prover.predicted_challenge == bet
                assert h.edge_count == (cycle4 if bet else path4).edge_count
                prover.respond(gi.Challenge(bit=bet))

    def test_bias_does_not_help(self, randomness, path4, cycle4):
        """The public coin is uniform, so any fixed bet wins half the time."""
        rounds = 2000
        accepted = 0
        for i in range(rounds):
            prover = gi.CheatingProver(path4, cycle4, randomness.fork(2 * i), p_one=0.9)
            verifier = gi.Verifier(path4, cycle4, randomness.fork(2 * i + 1))
            ok, _ = gi.run_round(prover, verifier)
            accepted += ok
        # Mean 1000, std ~22
        assert accepted / rounds <= 0.5 + 0.06


class TestVerifier:
    """Tests for role ordering."""

    def test_decide_before_challenge(self, path4):
        verifier = gi.Verifier(path4, path4, SeededRandomSource(1))
        with pytest.raises(RuntimeError):
            verifier.decide(gi.Response(permutation=(0, 1, 2, 3)))

    def test_second_commitment_refused(self, path4):
        verifier = gi.Verifier(path4, path4, SeededRandomSource(1))
        verifier.challenge(gi.Commitment(graph=path4))
        with pytest.raises(RuntimeError):
            verifier.challenge(gi.Commitment(graph=path4))

    def test_challenge_bits_balanced(self, randomness, path4):
        bits = []
        for i in range(1000):
            verifier = gi.Verifier(path4, path4, randomness.fork(i))
            bits.append(verifier.challenge(gi.Commitment(graph=path4)).bit)
        # Mean 500, std ~16
        assert 400 < sum(bits) < 600
