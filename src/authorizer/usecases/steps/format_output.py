from __future__ import annotations

import json

from authorizer.usecases.messages import OperationResult, OutputLine


class FormatOutput:
    # Renders OperationResult as one NDJSON line with fixed key order.
    def __call__(self, msg: OperationResult, ctx: object | None) -> list[OutputLine]:
        payload = {
            "account": {
                "active-card": msg.state.active_card,
                "available-limit": msg.state.available_limit,
            },
            "violations": list(msg.state.violations),
        }
        json_text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return [OutputLine(line_no=msg.line_no, json_text=json_text)]
