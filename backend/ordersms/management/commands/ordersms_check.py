import json
import sys

from django.core.management.base import BaseCommand
from django.utils import timezone

from ordersms.serializers import ValidationResponseSerializer
from ordersms.validation import validate_channel


class Command(BaseCommand):
    help = "Validate the stored Twilio credentials (optionally per channel) and send test SMS to admin numbers."

    def add_arguments(self, parser):
        parser.add_argument("--channel", default=None, help="Channel id whose configuration to check")
        parser.add_argument("--skip-test-sms", action="store_true", help="Only check credentials, send nothing")
        parser.add_argument("--json", action="store_true", help="Output as JSON (default is pretty text)")

    def handle(self, *args, **opts):
        result = validate_channel(opts.get("channel"), send_test_sms=not opts.get("skip_test_sms"))
        if result.valid:
            out = dict(ValidationResponseSerializer(result).data)
        else:
            out = {"valid": False, "message": result.message}
        out["time"] = timezone.now().isoformat()
        out["channel"] = opts.get("channel")

        if opts.get("json"):
            self.stdout.write(json.dumps(out, indent=2))
        else:
            self.stdout.write(f"\n=== Order SMS credential check ({out['time']}) ===\n")
            self.stdout.write(f"Channel: {out['channel'] or 'global'}\n\n")
            mark = "✅" if result.valid else "❌"
            self.stdout.write(f" {mark}  {result.message}\n")
            if result.account_name:
                self.stdout.write(f"     account: {result.account_name} ({result.account_status})\n")
            for r in result.test_results:
                detail = r.provider_message_id if r.success else r.error_detail
                self.stdout.write(f"     {'✅' if r.success else '❌'} {r.recipient}: {detail}\n")

        # Exit with code 1 on failure (for CI)
        if not result.valid:
            sys.exit(1)
