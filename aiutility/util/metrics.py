import numpy as np


class UtilityHistory:
    """Rolling window of the most recent chosen utilities.

    Backed by a fixed-size numpy ring buffer; once full, each new sample
    overwrites the oldest one.
    """

    def __init__(self, num_samples: int = 256) -> None:
        if num_samples <= 0:
            raise ValueError(f"num_samples must be positive, got {num_samples}")
        self.num_samples = num_samples
        self.samples = np.zeros(num_samples, dtype=np.float64)
        self.count = 0
        self.write_index = 0

    def record(self, utility: float) -> None:
        self.samples[self.write_index] = utility
        self.write_index = (self.write_index + 1) % self.num_samples
        self.count += 1

    @property
    def sample_count(self) -> int:
        return min(self.count, self.num_samples)

    def _get_valid_samples(self) -> np.ndarray:
        if self.count <= self.num_samples:
            return self.samples[: self.count]
        # Wrapped: oldest sample sits at the write index
        return np.concatenate(
            [self.samples[self.write_index :], self.samples[: self.write_index]]
        )

    def values(self) -> list[float]:
        """Return the kept samples, oldest first."""
        return [float(v) for v in self._get_valid_samples()]

    @property
    def mean(self) -> float:
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return 0.0
        return float(valid.mean())

    def get_percentiles(self) -> tuple[float, float, float]:
        """Return (p50, p95, p99), or zeros when nothing was recorded."""
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return (0.0, 0.0, 0.0)
        p50, p95, p99 = np.percentile(valid, [50, 95, 99])
        return (float(p50), float(p95), float(p99))

    def get_percentiles_string(self) -> str:
        p50, p95, p99 = self.get_percentiles()
        return f"p50={p50:.3f} p95={p95:.3f} p99={p99:.3f}"
