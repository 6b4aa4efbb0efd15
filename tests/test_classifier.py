from env_scream.classifier import Autopsy, classify


class TestClassify:
    def test_empty_suspects(self):
        result = classify([], {"A"})
        assert result.missing == []
        assert result.misconfigured == []
        assert result.is_clean

    def test_no_reference_means_everything_missing(self):
        result = classify(["A", "B"], set())
        assert result.missing == ["A", "B"]
        assert result.misconfigured == []

    def test_split_preserves_order(self):
        result = classify(["C", "A", "D", "B"], {"A", "B"})
        assert result.missing == ["C", "D"]
        assert result.misconfigured == ["A", "B"]

    def test_partition_law(self):
        suspects = ["API_KEY", "DATABASE_URL", "PORT", "SECRET"]
        reference = {"PORT", "SECRET", "UNRELATED"}
        result = classify(suspects, reference)

        assert set(result.missing).isdisjoint(result.misconfigured)
        assert set(result.missing) | set(result.misconfigured) == set(suspects)
        assert sorted(result.suspects) == sorted(suspects)


class TestAutopsy:
    def test_defaults_are_empty(self):
        autopsy = Autopsy()
        assert autopsy.is_clean
        assert autopsy.suspects == []

    def test_dump(self):
        autopsy = Autopsy(missing=["A"], misconfigured=["B"])
        assert autopsy.model_dump() == {"missing": ["A"], "misconfigured": ["B"]}
