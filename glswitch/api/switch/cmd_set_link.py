"""Set-link command - switch the system GL links to a vendor driver."""

from collections.abc import Iterator

from .._output_schemas.switch import SetLinkOutput
from ..StageResult import StageResult
from .LIBRARY_DESCRIPTORS import LIBRARY_DESCRIPTORS
from .LinkSwitchError import LinkSwitchError
from .RelinkRecord import RelinkRecord
from .require_root import require_root
from .SUPPORTED_DRIVERS import SUPPORTED_DRIVERS
from .SwitchConfig import SwitchConfig
from .update_links import update_links


def cmd_set_link(driver_name: str, staged: bool = False) -> StageResult:
    """Point the system GL links at the libraries of ``driver_name``.

    Checks privileges first, then that the driver is supported, and only
    then touches the filesystem. Success means all libraries were relinked.

    Args:
        driver_name: Vendor name, must be in SUPPORTED_DRIVERS.
        staged: Resolve every vendor library before changing any link.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config = SwitchConfig.load()
        errors: list[str] = []
        warnings: list[str] = []
        records: list[RelinkRecord] = []
        total = len(LIBRARY_DESCRIPTORS)

        yield (0.0, "Checking privileges...")
        try:
            require_root()
        except PermissionError as e:
            errors.append(str(e))

        if not errors and driver_name not in SUPPORTED_DRIVERS:
            errors.append(f"Unsupported driver: {driver_name}")

        if not errors:
            yield (0.1, f"Switching to {config.vendor_dir(driver_name)}...")
            try:
                for record in update_links(driver_name, config, staged=staged):
                    records.append(record)
                    if record.replaced and record.previous is None:
                        warnings.append(f"Replaced non-symlink entry at {record.target}")
                    yield (len(records) / total, f"{record.target} -> {record.resolved}")
            except LinkSwitchError as e:
                errors.append(str(e))

        if errors:
            result_obj.result = errors[0]
        else:
            result_obj.result = f"Switched {len(records)} GL links to '{driver_name}'"
        result_obj.output = SetLinkOutput(
            errors=errors,
            warnings=warnings,
            driver=driver_name,
            vendor_dir=str(config.vendor_dir(driver_name)),
            staged=staged,
            links=[record.to_dict() for record in records],
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce=f"Setting GL links to driver '{driver_name}'...",
        progress_callback=do_work,
    )
