"""Management command to export client validation rules as a static asset."""
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from rest_framework.renderers import JSONRenderer

from client_validation.renderers import ClientValidationScriptRenderer
from client_validation.rules import build_client_validation_rules

RENDERERS = {
    "json": JSONRenderer,
    "script": ClientValidationScriptRenderer,
}


class Command(BaseCommand):
    help = "Render the client validation rules of all view models as JSON or JavaScript"

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            choices=sorted(RENDERERS),
            default="script",
            help="Output format (default: script)",
        )
        parser.add_argument(
            "--output",
            help="File to write to; prints to stdout when omitted",
        )

    def handle(self, *args, **options):
        rules = build_client_validation_rules()
        content = RENDERERS[options["format"]]().render(rules).decode("utf-8")

        output = options.get("output")
        if not output:
            self.stdout.write(content, ending="")
            return

        path = Path(output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise CommandError(f"Could not write {path}: {e}") from e

        self.stdout.write(self.style.SUCCESS(
            f"Exported rules for {len(rules)} view models to {path}"
        ))
