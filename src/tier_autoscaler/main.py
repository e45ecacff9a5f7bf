#!/usr/bin/env python3
"""
Tier Autoscaler - Main Entry Point
Evaluates autoscaling policies against a cluster snapshot and prints the decisions as JSON
"""

import json
import os
import sys
import time
from typing import Any, Dict, List, Optional

from .config import Settings
from .core.decision import AutoscalingDecisionService, DecisionServiceHolder
from .core.decision_metrics import export_metrics, record_decision_failure, record_decision_run
from .core.logging_config import get_logger, setup_logging
from .deciders import default_decider_services
from .snapshot import load_snapshot


def build_decision_service() -> AutoscalingDecisionService:
    """Decision service wired with the built-in deciders"""
    return AutoscalingDecisionService.from_services(default_decider_services())


decision_service = DecisionServiceHolder(build_decision_service)


class DecisionRunner:
    """Loads snapshots, runs the decision service and records metrics"""

    def __init__(self, config_path: Optional[str] = None, holder: DecisionServiceHolder = decision_service):
        if config_path and os.path.exists(config_path):
            self.settings = Settings.load_from_yaml_with_env_override(config_path)
        else:
            self.settings = Settings()

        setup_logging(
            level=self.settings.logging.level,
            log_file=self.settings.logging.file,
            enable_colors=self.settings.logging.enable_colors,
            log_format=self.settings.logging.format
        )
        self.logger = get_logger(__name__)
        self.holder = holder

        if self.settings.debug:
            self.logger.info(f"Debug mode enabled. Settings: {self.settings.get_config_dict()}")

    def run(self, snapshot_path: str) -> Dict[str, Any]:
        """
        Evaluate a snapshot file

        Args:
            snapshot_path: Path to the snapshot document

        Returns:
            Dict of policy name to JSON ready decisions
        """
        snapshot = load_snapshot(snapshot_path)
        service = self.holder.get()

        start = time.perf_counter()
        try:
            if self.settings.decision.validate_policies:
                service.validate_policies(snapshot.policies)
            results = service.decide(snapshot.topology, snapshot.telemetry, snapshot.policies)
        except Exception:
            record_decision_failure()
            raise
        duration = time.perf_counter() - start

        record_decision_run(results, duration)
        if self.settings.decision.metrics_enabled:
            export_metrics(self.settings.decision.metrics_textfile)

        for policy_name, decisions in results.items():
            if not decisions.current_capacity.is_known:
                self.logger.warning(f"Policy '{policy_name}': current capacity of tier '{decisions.tier}' unknown")

        self.logger.info(f"Evaluated {len(results)} policies in {duration * 1000:.2f}ms")
        return {name: decisions.to_dict() for name, decisions in results.items()}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    import argparse

    parser = argparse.ArgumentParser(description='Tier autoscaling decision engine')
    parser.add_argument(
        '--config',
        default=os.getenv('CONFIG_PATH'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--snapshot',
        default=None,
        help='Path to the topology, telemetry and policy snapshot (YAML or JSON)'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help='JSON indentation of the printed decisions'
    )

    args = parser.parse_args(argv)

    runner = DecisionRunner(args.config)
    snapshot_path = args.snapshot or runner.settings.decision.snapshot_path
    if not snapshot_path:
        runner.logger.error("No snapshot given, use --snapshot or AUTOSCALER_SNAPSHOT_PATH")
        return 2

    try:
        output = runner.run(snapshot_path)
    except Exception as e:
        runner.logger.error(f"Fatal error: {e}")
        return 1

    print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
