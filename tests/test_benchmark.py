import json
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

from benchmarks import perf_test


class TestBenchmark(unittest.TestCase):
	def test_size_ratio_beats_base64(self):
		b91_ratio, b64_ratio = perf_test.size_ratio(1024, samples=3)
		self.assertLess(b91_ratio, b64_ratio)
		self.assertLess(b91_ratio, 1.24)

	def test_run_writes_results(self):
		with tempfile.TemporaryDirectory() as tmp:
			with redirect_stdout(StringIO()):
				result = perf_test.run_benchmark(loops=3, data_size=64, outputs_dir=Path(tmp))
			with open(result["latest_path"], encoding="utf-8") as f:
				latest = json.load(f)
		self.assertEqual(latest["meta"]["params"]["loops"], 3)
		self.assertIn("avg_enc_ms", latest["metrics"])


if __name__ == '__main__':
	unittest.main()
