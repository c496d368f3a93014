"""
Job driver for the AWS wrapper.

Runs each wrapper operation once, in order, and stops at the first
failure. What happens to that failure is decided by the configured
failure policy:

- raise: the exception propagates to the caller
- log: the failure is logged and the run ends with exit status 0
- exit-code: the failure is logged and the run ends with exit status 1
"""
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple
from config import (
    Config,
    get_config,
    FAILURE_POLICY_RAISE,
    FAILURE_POLICY_EXIT_CODE,
)
from logger_config import get_logger, set_level
from models import KinesisRecord, S3Object
from services.aws_wrapper import AWSWrapper
from utils.decorators import lambda_handler
from utils.exceptions import ConfigurationError, NotFoundError, TransmissionError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STEP_FAILED = 1
EXIT_CONFIG_ERROR = 2

STEPS: List[Tuple[str, Callable[[AWSWrapper], Any]]] = [
    ('put_kinesis_record', lambda w: w.put_kinesis_record(KinesisRecord(name='Record Name'))),
    ('list_shards', lambda w: w.list_shards(w.stream_name)),
    ('get_item', lambda w: w.get_item('item_id')),
    ('query_table', lambda w: w.query_table('ID', 'PREFIX')),
    ('put_object', lambda w: w.put_object('s3_file.json', S3Object(name='Object Name'))),
    ('receive_message', lambda w: w.receive_message()),
    ('publish_message', lambda w: w.publish_message()),
]

STEP_ERRORS = (TransmissionError, NotFoundError, ConfigurationError)


@dataclass
class JobResult:
    """Outcome of one run: the steps that finished and the one that failed, if any."""

    completed_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.failed_step is None


def run_job(wrapper: AWSWrapper, failure_policy: str = FAILURE_POLICY_EXIT_CODE) -> JobResult:
    """
    Run every step once, in order, stopping at the first failure.

    Args:
        wrapper: Constructed AWS wrapper
        failure_policy: One of the FAILURE_POLICY_* values

    Returns:
        JobResult describing how far the run got

    Raises:
        TransmissionError, NotFoundError, ConfigurationError: Only under
            the raise policy
    """
    result = JobResult()

    for name, step in STEPS:
        logger.info(f'Running step {name}')
        try:
            step(wrapper)
        except STEP_ERRORS as e:
            if failure_policy == FAILURE_POLICY_RAISE:
                raise
            logger.error(f'Step {name} failed, stopping run: {str(e)}', exc_info=True)
            result.failed_step = name
            result.error = e
            return result
        result.completed_steps.append(name)

    logger.info(f'All {len(result.completed_steps)} steps completed')
    return result


def main() -> int:
    """Console entry point. Returns the process exit status."""
    try:
        config: Config = get_config()
    except ConfigurationError as e:
        logger.error(f'Invalid configuration: {str(e)}')
        return EXIT_CONFIG_ERROR

    set_level(logger, config.log_level)

    try:
        wrapper = AWSWrapper.from_config(config)
    except ConfigurationError as e:
        if config.failure_policy == FAILURE_POLICY_RAISE:
            raise
        logger.error(f'Could not set up AWS clients: {str(e)}')
        return EXIT_CONFIG_ERROR

    result = run_job(wrapper, config.failure_policy)
    if result.succeeded or config.failure_policy != FAILURE_POLICY_EXIT_CODE:
        return EXIT_OK
    return EXIT_STEP_FAILED


@lambda_handler
def job_handler(event, context):
    """Run the job from Lambda; failures become a structured error response."""
    wrapper = AWSWrapper.from_config(get_config())
    result = run_job(wrapper, FAILURE_POLICY_RAISE)
    return {"completed_steps": result.completed_steps}


if __name__ == '__main__':
    sys.exit(main())
