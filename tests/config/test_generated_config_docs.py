import hashlib

from scripts.generate_config_docs import OUTPUT_PATH, generate


def test_generated_config_docs_up_to_date():
    before = OUTPUT_PATH.read_bytes() if OUTPUT_PATH.exists() else b""
    after = generate().encode("utf-8")
    if before != after:
        # Provide quick hash codes to help debug in CI
        b_hash = hashlib.sha256(before).hexdigest()
        a_hash = hashlib.sha256(after).hexdigest()
        raise AssertionError(
            "Generated-Config.md outdated (before "
            f"{b_hash} != after {a_hash}). "
            "Run scripts/generate_config_docs.py and commit the result."
        )


def test_generated_docs_list_every_field():
    text = generate()
    for field in ("serverUrl", "apiKey", "customPrompt", "extractionStrategy"):
        assert f"| {field} |" in text
