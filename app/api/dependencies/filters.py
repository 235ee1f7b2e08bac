"""Query-string filter parsing shared by list endpoints."""

from typing import Callable, Optional, Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from app.api.dependencies.services import get_correlation_id
from app.services.exceptions import ValidationError

FilterModel = TypeVar("FilterModel", bound=BaseModel)


def query_filters(model: Type[FilterModel]) -> Callable[..., FilterModel]:
	"""Build a dependency that validates the whole query string against ``model``.

	Unknown keys and ill-typed values become a 400 ``ValidationError``
	instead of being silently ignored.
	"""

	def dependency(
		request: Request,
		correlation_id: Optional[str] = Depends(get_correlation_id),
	) -> FilterModel:
		try:
			return model.model_validate(dict(request.query_params))
		except SchemaValidationError as e:
			errors = [
				{"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
				for err in e.errors()
			]
			raise ValidationError(
				field="query",
				message="; ".join(f"{err['loc']}: {err['msg']}" if err["loc"] else err["msg"] for err in errors),
				correlation_id=correlation_id,
				validation_errors=errors,
			)

	return dependency
