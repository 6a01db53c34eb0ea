import logging
from typing import Any, Dict, Iterable, Optional, Union

from ..config import SkelforgeConfig
from ..dom.heuristics import DEFAULT_POLICY, GeometryPolicy
from ..dom.node import VisualNode
from ..errors import ContextClosedError, SkelforgeError
from ..mapping.engine import RuleSet, merge_rules
from ..mapping.rules_schema import load_rules
from ..mapping.schema import MappingRule, SkeletonSpec
from ..spec.cache import SpecCache
from ..spec.generator import Component, generate_live_spec, generate_static_spec, minimal_spec
from ..spec.registry import SpecRegistry
from ..spec.serializer import hydrate_spec, load_static_spec

logger = logging.getLogger(__name__)


class SkeletonContext:
    """
    Owns everything a process needs to produce skeletons: config, the merged
    rule set, a registry of named specs and a spec cache. Create as many as
    needed; they share no state.
    """

    def __init__(
        self,
        config: SkelforgeConfig,
        rules: RuleSet,
        registry: SpecRegistry,
        cache: SpecCache,
        policy: GeometryPolicy = DEFAULT_POLICY,
    ):
        self.config = config
        self.rules = rules
        self.registry = registry
        self.cache = cache
        self.policy = policy
        self.closed = False

    @classmethod
    def create(
        cls,
        config: Optional[SkelforgeConfig] = None,
        rules: Optional[Iterable[Union[MappingRule, dict]]] = None,
        policy: Optional[GeometryPolicy] = None,
        with_predefined: bool = True,
    ) -> "SkeletonContext":
        config = config or SkelforgeConfig()
        custom = list(rules or [])
        if config.rules_file:
            custom += load_rules(config.rules_file)
        registry = SpecRegistry.with_defaults() if with_predefined else SpecRegistry()
        policy = policy or DEFAULT_POLICY

        async def _generate(component, params, rule_set):
            return await generate_static_spec(component, params, rule_set, policy=policy)

        return cls(config, merge_rules(custom), registry, SpecCache(generator=_generate), policy)

    def _check_open(self) -> None:
        if self.closed:
            raise ContextClosedError("SkeletonContext is closed")

    def clear(self) -> None:
        self.cache.clear()
        self.registry.clear()

    def close(self) -> None:
        self.cache.close()
        self.registry.clear()
        self.closed = True

    def generate_live(self, root: VisualNode, keep_space: Optional[bool] = None) -> SkeletonSpec:
        self._check_open()
        return generate_live_spec(
            root,
            self.rules,
            max_depth=self.config.max_depth,
            budget=self.config.scan_budget(),
            policy=self.policy,
            keep_space=self.config.keep_space if keep_space is None else keep_space,
        )

    async def generate_static(self, component: Component, params: Optional[Dict[str, Any]] = None) -> SkeletonSpec:
        self._check_open()
        return await self.cache.get_or_generate(component, params, self.rules)

    async def resolve_spec(
        self,
        component: Component,
        params: Optional[Dict[str, Any]] = None,
        fallback: Optional[Union[SkeletonSpec, str]] = None,
    ) -> SkeletonSpec:
        """
        Spec for a loading UI; never raises for generation problems.
        Order: cache or fresh generation, the caller's fallback (a spec or a
        registry name), then a one-bar minimal spec.
        """
        self._check_open()
        try:
            return await self.cache.get_or_generate(component, params, self.rules)
        except SkelforgeError as exc:
            logger.warning("Skeleton generation failed, using fallback: %s", exc)
        if isinstance(fallback, str):
            named = self.registry.get(fallback)
            if named is not None:
                return named
            logger.warning("Fallback spec %r is not registered", fallback)
        elif fallback is not None:
            return fallback
        return minimal_spec()

    def load(self, text: str, enhancements: Optional[Dict[str, Any]] = None) -> SkeletonSpec:
        """Load a pre-generated spec and optionally hydrate it."""
        spec = load_static_spec(text)
        return hydrate_spec(spec, enhancements) if enhancements else spec
