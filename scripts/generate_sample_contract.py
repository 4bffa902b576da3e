"""Generate a contract from a JSON wizard form."""

import json
import sys
import os

sys.path.append(os.getcwd())

from core.contracts.types import ContractForm
from core.pipeline import contract_pipeline


DEFAULT_FORM = os.path.join("scripts", "sample_form.json")


def load_form(path: str) -> ContractForm:
    """Load a wizard form saved as camelCase JSON."""
    with open(path, encoding="utf-8") as handle:
        return ContractForm.model_validate(json.load(handle))


def generate(path: str) -> None:
    """Run the pipeline on one form and print the result."""
    print(f"\n📄 Form: {path}")

    form = load_form(path)
    preview = contract_pipeline.preview(form)

    print(f"✅ Contract type: {preview.form.contract_type}")
    print(f"✅ Sections: {len([s for s in preview.sections if s.number])}")

    for warning in preview.validation.warnings:
        print(f"⚠️  {warning}")
    for error in preview.validation.errors:
        print(f"❌ {error}")

    print("\n" + "=" * 60)
    print(preview.contract)
    print("=" * 60)

    if preview.validation.valid:
        _, exported = contract_pipeline.export(form)
        with open(exported.filename, "w", encoding="utf-8") as handle:
            handle.write(exported.content)
        print(f"\n💾 Saved {exported.filename}")
    else:
        print("\n⚠️  Form is incomplete, export skipped.")


if __name__ == "__main__":
    generate(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_FORM)
