# -*- coding: utf-8 -*-
"""
base

Common action dispatch for workplace dialogs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, TYPE_CHECKING

from ..core.exceptions import (
    PermissionDenied,
    ResourceNotFound,
    ValidationError,
    WorkplaceError,
)
from ..core.messages import MessageCatalog
from ..core.models import Permission, RequestContext, Resource
from ..core.reports import ReportThread
from ..core.settings.choices import StrChoices

if TYPE_CHECKING:  # pragma: no cover
    from ..core.context import WorkplaceContext


class DialogAction(StrChoices):
    """Values of the ``action`` request parameter."""

    DEFAULT = ("default", "Show the dialog")
    CONFIRMED = ("confirmed", "Perform the action")
    CANCEL = ("cancel", "Close the dialog")
    REPORT_BEGIN = ("reportbegin", "Start the report")
    REPORT_UPDATE = ("reportupdate", "Fetch report lines")
    REPORT_END = ("reportend", "Finish the report")

    @classmethod
    def parse(cls, value: str | None) -> "DialogAction":
        """Return the action named by ``value``; unknown values mean ``DEFAULT``."""

        token = (value or "").strip().lower()
        for member in cls:
            if member.value == token:
                return member
        return cls.DEFAULT


@dataclass
class DialogOutcome:
    """Template and context a dialog step wants rendered."""

    view: str
    context: Dict[str, Any] = field(default_factory=dict)
    report_id: str | None = None
    status_code: int = 200


class BaseDialog(ABC):
    """Dispatch the dialog ``action`` parameter to form, action, or close."""

    key: str = "dialog"
    title_key: str = "dialog.title"
    confirm_action: DialogAction = DialogAction.CONFIRMED

    FORM_VIEW = "workplace/dialog_form.html"
    DONE_VIEW = "workplace/dialog_done.html"
    ERROR_VIEW = "workplace/dialog_error.html"

    def __init__(self, workplace: "WorkplaceContext") -> None:
        self.workplace = workplace
        self.logger = logging.getLogger(__name__)

    @property
    def repository(self):
        return self.workplace.repository

    def catalog(self, context: RequestContext) -> MessageCatalog:
        return self.workplace.catalog(context.locale)

    def perform(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        """Run the step selected by the ``action`` parameter."""

        action = DialogAction.parse(params.get("action"))
        if action == DialogAction.CANCEL:
            return self.outcome(self.DONE_VIEW, context, closed=True)
        if action in (DialogAction.CONFIRMED, DialogAction.REPORT_BEGIN):
            try:
                return self.perform_action(params, context)
            except WorkplaceError as exc:
                return self.error_outcome(exc, context)
        return self.form_outcome(params, context)

    @abstractmethod
    def perform_action(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        """Execute the confirmed dialog action."""

    def form_fields(self, params: Mapping[str, str], context: RequestContext) -> Dict[str, Any]:
        """Return extra template values for the dialog form."""

        return {"resource": params.get("resource", "")}

    def form_outcome(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        return self.outcome(
            self.FORM_VIEW,
            context,
            confirm_action=self.confirm_action.value,
            **self.form_fields(params, context),
        )

    def success(self, context: RequestContext, message_key: str, *args: object) -> DialogOutcome:
        """Forward to the done view showing ``message_key``."""

        message = self.catalog(context).key(message_key, *args)
        return self.outcome(self.DONE_VIEW, context, message=message, closed=False)

    def error_outcome(self, exc: WorkplaceError, context: RequestContext) -> DialogOutcome:
        """Forward to the error view describing ``exc``."""

        self.logger.error("Dialog %s failed for %s: %s", self.key, context.user.name, exc)
        status_code = getattr(exc, "status_code", 500)
        return DialogOutcome(
            view=self.ERROR_VIEW,
            context=self.base_context(
                context,
                message=str(exc) or self.catalog(context).key("error.unknown"),
                error_class=exc.__class__.__name__,
            ),
            status_code=status_code,
        )

    def outcome(self, view: str, context: RequestContext, **values: Any) -> DialogOutcome:
        return DialogOutcome(view=view, context=self.base_context(context, **values))

    def base_context(self, context: RequestContext, **values: Any) -> Dict[str, Any]:
        catalog = self.catalog(context)
        data: Dict[str, Any] = {
            "dialog": self.key,
            "title": catalog.key(self.title_key),
            "catalog": catalog,
            "user": context.user,
        }
        data.update(values)
        return data

    # --- shared checks -------------------------------------------------------

    def required_param(
        self, params: Mapping[str, str], name: str, context: RequestContext
    ) -> str:
        value = (params.get(name) or "").strip()
        if not value:
            raise ValidationError(self.catalog(context).key("error.param.missing", name))
        return value

    def read_writable(self, path: str, context: RequestContext) -> Resource:
        """Return the resource at ``path`` after checking write permission."""

        if not self.repository.exists(path):
            raise ResourceNotFound(self.catalog(context).key("error.resource.missing", path))
        resource = self.repository.read_resource(path)
        if not self.repository.has_permission(context.user, path, Permission.WRITE):
            raise PermissionDenied(
                self.catalog(context).key("error.permission.write", path)
            )
        return resource


class ReportDialog(BaseDialog):
    """Dialog running its action in a background report thread."""

    REPORT_VIEW = "workplace/report.html"
    confirm_action = DialogAction.REPORT_BEGIN

    def perform(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        action = DialogAction.parse(params.get("action"))
        if action in (DialogAction.REPORT_UPDATE, DialogAction.REPORT_END):
            return self.report_outcome(params, context, finished=action == DialogAction.REPORT_END)
        return super().perform(params, context)

    @abstractmethod
    def create_thread(self, params: Mapping[str, str], context: RequestContext) -> ReportThread:
        """Validate the request and return the unstarted worker."""

    def perform_action(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        thread = self.create_thread(params, context)
        report_id = self.workplace.reports.start(thread)
        self.logger.info("Dialog %s started report %s", self.key, report_id)
        outcome = self.outcome(
            self.REPORT_VIEW,
            context,
            report_id=report_id,
            lines=[],
            finished=False,
            poll_interval=self.workplace.settings.report_poll_interval,
        )
        outcome.report_id = report_id
        return outcome

    def report_outcome(
        self, params: Mapping[str, str], context: RequestContext, *, finished: bool
    ) -> DialogOutcome:
        report_id = params.get("report") or ""
        try:
            lines, done = self.workplace.reports.poll(report_id)
        except KeyError:
            return self.error_outcome(
                ResourceNotFound(self.catalog(context).key("error.report.missing", report_id)),
                context,
            )
        if finished and done:
            self.workplace.reports.release(report_id)
        outcome = self.outcome(
            self.REPORT_VIEW,
            context,
            report_id=report_id,
            lines=lines,
            finished=done or finished,
            poll_interval=self.workplace.settings.report_poll_interval,
        )
        outcome.report_id = report_id
        return outcome


__all__ = ["DialogAction", "DialogOutcome", "BaseDialog", "ReportDialog"]


# The End
