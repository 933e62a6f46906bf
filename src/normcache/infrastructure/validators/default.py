"""Default structure validator built on graphql-core ASTs."""

import logging
from collections.abc import Mapping
from typing import Any

from graphql import (
    BooleanValueNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    InlineFragmentNode,
    NamedTypeNode,
    OperationDefinitionNode,
    SelectionSetNode,
    ValueNode,
    VariableNode,
    value_from_ast_untyped,
)

from normcache.core.entities.validation_config import ValidationConfig

logger = logging.getLogger(__name__)

Path = tuple[str | int, ...]


class StructureValidationError(Exception):
    """Base class for structure validation failures."""

    pass


class PartialDataError(StructureValidationError):
    """Raised when a payload lacks data its selection set requires."""

    def __init__(self, message: str, path: Path = ()) -> None:
        self.path = path
        location = ".".join(str(part) for part in path) or "<root>"
        super().__init__(f"{message} at {location}")


class InvalidDocumentError(StructureValidationError):
    """Raised when the document cannot be interpreted for validation."""

    pass


class DefaultStructureValidator:
    """Validates payloads by walking the selection set of a definition.

    Every field selected (and not excluded by @skip/@include) must be
    present in the payload under its response key. Fragment spreads and
    inline fragments are followed when their type condition applies.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        """Initialize the validator.

        Args:
            config: Optional validation configuration. Uses defaults if
                not provided.
        """
        self._config = config or ValidationConfig()

    @property
    def config(self) -> ValidationConfig:
        """Get the validation configuration."""
        return self._config

    def validate_fragment(
        self,
        document: DocumentNode,
        fragment_name: str | None,
        variables: Mapping[str, Any],
        data: Any,
        handle_exception: bool | None = None,
    ) -> bool:
        """Validate data against a fragment definition.

        Args:
            document: Document containing the fragment definition.
            fragment_name: Name of the fragment to validate against.
            variables: Variables used to resolve @skip/@include.
            data: The candidate payload.
            handle_exception: Return False instead of raising on failure.
                Defaults to the configured handle_exceptions.

        Returns:
            True if the payload matches the fragment's structure.

        Raises:
            StructureValidationError: If validation fails and
                handle_exception is False.
        """
        if handle_exception is None:
            handle_exception = self._config.handle_exceptions

        try:
            fragments = self._collect_fragments(document)
            definition = self._get_fragment_definition(fragments, fragment_name)
            self._validate_object(
                definition.selection_set,
                data,
                type_condition=definition.type_condition,
                fragments=fragments,
                variables=variables,
                path=(),
                expanding=frozenset({definition.name.value}),
            )
        except StructureValidationError as e:
            if not handle_exception:
                raise
            logger.debug("Fragment %s does not match data: %s", fragment_name, e)
            return False
        return True

    def validate_operation(
        self,
        document: DocumentNode,
        operation_name: str | None,
        variables: Mapping[str, Any],
        data: Any,
        handle_exception: bool | None = None,
    ) -> bool:
        """Validate data against an operation definition.

        Args:
            document: Document containing the operation definition.
            operation_name: Name of the operation to validate against.
            variables: Variables used to resolve @skip/@include.
            data: The candidate payload (the ``data`` member of a response).
            handle_exception: Return False instead of raising on failure.
                Defaults to the configured handle_exceptions.

        Returns:
            True if the payload matches the operation's structure.

        Raises:
            StructureValidationError: If validation fails and
                handle_exception is False.
        """
        if handle_exception is None:
            handle_exception = self._config.handle_exceptions

        try:
            fragments = self._collect_fragments(document)
            definition = self._get_operation_definition(document, operation_name)
            self._validate_object(
                definition.selection_set,
                data,
                type_condition=None,
                fragments=fragments,
                variables=self._with_defaults(definition, variables),
                path=(),
                expanding=frozenset(),
            )
        except StructureValidationError as e:
            if not handle_exception:
                raise
            logger.debug("Operation %s does not match data: %s", operation_name, e)
            return False
        return True

    def _collect_fragments(
        self, document: DocumentNode
    ) -> dict[str, FragmentDefinitionNode]:
        return {
            definition.name.value: definition
            for definition in document.definitions
            if isinstance(definition, FragmentDefinitionNode)
        }

    def _get_fragment_definition(
        self,
        fragments: dict[str, FragmentDefinitionNode],
        fragment_name: str | None,
    ) -> FragmentDefinitionNode:
        if fragment_name is None:
            if len(fragments) != 1:
                raise InvalidDocumentError(
                    f"Document contains {len(fragments)} fragment definitions, "
                    "a fragment name must be given"
                )
            return next(iter(fragments.values()))

        definition = fragments.get(fragment_name)
        if definition is None:
            raise InvalidDocumentError(f"Fragment '{fragment_name}' not found")
        return definition

    def _get_operation_definition(
        self, document: DocumentNode, operation_name: str | None
    ) -> OperationDefinitionNode:
        operations = [
            definition
            for definition in document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ]

        if operation_name is None:
            if len(operations) != 1:
                raise InvalidDocumentError(
                    f"Document contains {len(operations)} operations, "
                    "an operation name must be given"
                )
            return operations[0]

        for operation in operations:
            if operation.name is not None and operation.name.value == operation_name:
                return operation
        raise InvalidDocumentError(f"Operation '{operation_name}' not found")

    def _with_defaults(
        self, definition: OperationDefinitionNode, variables: Mapping[str, Any]
    ) -> Mapping[str, Any]:
        defaults = {
            variable.variable.name.value: value_from_ast_untyped(variable.default_value)
            for variable in definition.variable_definitions or ()
            if variable.default_value is not None
        }
        if not defaults:
            return variables
        return {**defaults, **variables}

    def _validate_object(
        self,
        selection_set: SelectionSetNode,
        data: Any,
        type_condition: NamedTypeNode | None,
        fragments: dict[str, FragmentDefinitionNode],
        variables: Mapping[str, Any],
        path: Path,
        expanding: frozenset[str],
    ) -> None:
        if not isinstance(data, Mapping):
            raise PartialDataError(
                f"Expected an object, got {type(data).__name__}", path
            )

        if self._config.add_typename and "__typename" not in data:
            raise PartialDataError("Missing __typename", path)

        if not self._type_condition_applies(type_condition, data, path):
            raise PartialDataError(
                f"Type '{data['__typename']}' does not satisfy "
                f"type condition '{type_condition.name.value}'",
                path,
            )

        self._validate_selections(
            selection_set, data, fragments, variables, path, expanding
        )

    def _validate_selections(
        self,
        selection_set: SelectionSetNode,
        data: Mapping[str, Any],
        fragments: dict[str, FragmentDefinitionNode],
        variables: Mapping[str, Any],
        path: Path,
        expanding: frozenset[str],
    ) -> None:
        for selection in selection_set.selections:
            if not self._should_include(selection, variables):
                continue

            if isinstance(selection, FieldNode):
                key = (selection.alias or selection.name).value
                if key not in data:
                    raise PartialDataError("Missing field", (*path, key))
                if selection.selection_set is not None:
                    self._validate_value(
                        selection.selection_set,
                        data[key],
                        fragments,
                        variables,
                        (*path, key),
                        expanding,
                    )

            elif isinstance(selection, FragmentSpreadNode):
                name = selection.name.value
                if name in expanding:
                    raise InvalidDocumentError(f"Fragment '{name}' spreads itself")
                definition = fragments.get(name)
                if definition is None:
                    raise InvalidDocumentError(f"Fragment '{name}' not found")
                if self._type_condition_applies(
                    definition.type_condition, data, path
                ):
                    self._validate_selections(
                        definition.selection_set,
                        data,
                        fragments,
                        variables,
                        path,
                        expanding | {name},
                    )

            elif isinstance(selection, InlineFragmentNode):
                if self._type_condition_applies(
                    selection.type_condition, data, path
                ):
                    self._validate_selections(
                        selection.selection_set,
                        data,
                        fragments,
                        variables,
                        path,
                        expanding,
                    )

    def _validate_value(
        self,
        selection_set: SelectionSetNode,
        value: Any,
        fragments: dict[str, FragmentDefinitionNode],
        variables: Mapping[str, Any],
        path: Path,
        expanding: frozenset[str],
    ) -> None:
        # List nesting is unbounded in the payload, so it is walked with a stack
        stack: list[tuple[Any, Path]] = [(value, path)]

        while stack:
            item, item_path = stack.pop()

            if item is None:
                continue

            if isinstance(item, (list, tuple)):
                stack.extend(
                    (child, (*item_path, index))
                    for index, child in reversed(list(enumerate(item)))
                )
                continue

            self._validate_object(
                selection_set,
                item,
                type_condition=None,
                fragments=fragments,
                variables=variables,
                path=item_path,
                expanding=expanding,
            )

    def _type_condition_applies(
        self,
        type_condition: NamedTypeNode | None,
        data: Mapping[str, Any],
        path: Path,
    ) -> bool:
        if type_condition is None:
            return True

        typename = data.get("__typename")
        if typename is None:
            return True
        if not isinstance(typename, str):
            raise PartialDataError("Invalid __typename", (*path, "__typename"))

        condition = type_condition.name.value
        if typename == condition:
            return True
        return typename in self._config.possible_types.get(condition, ())

    def _should_include(self, node: Any, variables: Mapping[str, Any]) -> bool:
        if self._directive_condition(node, GraphQLSkipDirective.name, variables):
            return False
        include = self._directive_condition(
            node, GraphQLIncludeDirective.name, variables
        )
        return include is not False

    def _directive_condition(
        self, node: Any, directive_name: str, variables: Mapping[str, Any]
    ) -> bool | None:
        for directive in node.directives or ():
            if directive.name.value != directive_name:
                continue
            for argument in directive.arguments or ():
                if argument.name.value == "if":
                    return self._resolve_condition(
                        directive_name, argument.value, variables
                    )
            raise InvalidDocumentError(f"@{directive_name} requires an 'if' argument")
        return None

    def _resolve_condition(
        self, directive_name: str, value_node: ValueNode, variables: Mapping[str, Any]
    ) -> bool:
        if isinstance(value_node, BooleanValueNode):
            return value_node.value

        if isinstance(value_node, VariableNode):
            name = value_node.name.value
            value = variables.get(name)
            if isinstance(value, bool):
                return value
            raise InvalidDocumentError(
                f"@{directive_name}(if: ${name}) needs a boolean, "
                f"got {type(value).__name__}"
            )

        raise InvalidDocumentError(f"@{directive_name}(if:) must be a boolean")


def validate_fragment_data_structure(
    document: DocumentNode,
    data: Any,
    fragment_name: str | None = None,
    variables: Mapping[str, Any] | None = None,
    handle_exception: bool = False,
    add_typename: bool = False,
    possible_types: dict[str, set[str]] | None = None,
) -> bool:
    """Check that data matches the structure of a fragment.

    Args:
        document: Document containing the fragment definition.
        data: The candidate payload.
        fragment_name: Name of the fragment to validate against.
        variables: Variables used to resolve @skip/@include.
        handle_exception: Return False instead of raising on failure.
        add_typename: Require __typename on every object.
        possible_types: Abstract type name -> concrete type names.

    Returns:
        True if the payload matches the fragment's structure.
    """
    validator = DefaultStructureValidator(
        ValidationConfig(
            add_typename=add_typename,
            possible_types=possible_types or {},
        )
    )
    return validator.validate_fragment(
        document,
        fragment_name,
        variables or {},
        data,
        handle_exception=handle_exception,
    )


def validate_operation_data_structure(
    document: DocumentNode,
    data: Any,
    operation_name: str | None = None,
    variables: Mapping[str, Any] | None = None,
    handle_exception: bool = False,
    add_typename: bool = False,
    possible_types: dict[str, set[str]] | None = None,
) -> bool:
    """Check that data matches the structure of an operation.

    Args:
        document: Document containing the operation definition.
        data: The candidate payload (the ``data`` member of a response).
        operation_name: Name of the operation to validate against.
        variables: Variables used to resolve @skip/@include.
        handle_exception: Return False instead of raising on failure.
        add_typename: Require __typename on every object.
        possible_types: Abstract type name -> concrete type names.

    Returns:
        True if the payload matches the operation's structure.
    """
    validator = DefaultStructureValidator(
        ValidationConfig(
            add_typename=add_typename,
            possible_types=possible_types or {},
        )
    )
    return validator.validate_operation(
        document,
        operation_name,
        variables or {},
        data,
        handle_exception=handle_exception,
    )
