from abc import ABC, abstractmethod
from typing import List, Sequence
from .components import StandardSize
from .models import (SizingRequest, SizingResult, SizeSelection, VoltageDrop, TemperatureCheck,
                     ProtectionAdvice, SafeSizeSelection)

class CableCalculator(ABC):

    @property
    @abstractmethod
    def metric_sizes(self) -> Sequence[StandardSize]:
        """Standard metric sizes, ascending by area."""

    @property
    @abstractmethod
    def awg_sizes(self) -> Sequence[StandardSize]:
        """Standard AWG sizes, ascending by area."""

    @abstractmethod
    def effective_temperature(self, request: SizingRequest) -> float:
        pass

    @abstractmethod
    def resistivity(self, request: SizingRequest, effective_temp_c: float) -> float:
        pass

    @abstractmethod
    def required_area(self, request: SizingRequest) -> float:
        pass

    @abstractmethod
    def diameter(self, area: float) -> float:
        pass

    @abstractmethod
    def resolve(self, required_area: float, table: Sequence[StandardSize]) -> SizeSelection:
        pass

    @abstractmethod
    def actual_drop(self, size: StandardSize, request: SizingRequest) -> VoltageDrop:
        pass

    @abstractmethod
    def advise_protection(self, size: StandardSize, request: SizingRequest) -> ProtectionAdvice:
        pass

    @abstractmethod
    def minimum_safe_size(self, request: SizingRequest, table: Sequence[StandardSize]) -> SafeSizeSelection:
        pass

    @abstractmethod
    def check_temperature(self, request: SizingRequest, effective_temp_c: float) -> TemperatureCheck:
        pass

    @abstractmethod
    def weight(self, area: float, request: SizingRequest) -> float:
        pass

    def calculate(self, request: SizingRequest) -> SizingResult:
        """Thermal -> area -> standard sizes -> ampacity/fuse -> temperature check."""
        t_eff = self.effective_temperature(request)
        rho = self.resistivity(request, t_eff)
        area = self.required_area(request)
        diameter = self.diameter(area)

        metric = self.resolve(area, self.metric_sizes)
        awg = self.resolve(area, self.awg_sizes)
        metric_drop = self.actual_drop(metric.size, request)
        awg_drop = self.actual_drop(awg.size, request)

        metric_prot = self.advise_protection(metric.size, request)
        awg_prot = self.advise_protection(awg.size, request)
        min_metric = self.minimum_safe_size(request, self.metric_sizes)
        min_awg = self.minimum_safe_size(request, self.awg_sizes)

        temp_check = self.check_temperature(request, t_eff)

        warnings = self._collect_warnings(
            request, metric, awg, metric_drop, awg_drop, metric_prot, awg_prot,
            min_metric, min_awg, temp_check,
        )

        return SizingResult(
            request=request,
            effective_temp_c=t_eff,
            resistivity=rho,
            required_area_mm2=area,
            required_diameter_mm=diameter,
            metric=metric,
            awg=awg,
            metric_drop=metric_drop,
            awg_drop=awg_drop,
            temperature=temp_check,
            metric_protection=metric_prot,
            awg_protection=awg_prot,
            min_safe_metric=min_metric,
            min_safe_awg=min_awg,
            required_weight_g=self.weight(area, request),
            metric_weight_g=self.weight(metric.size.area_mm2, request),
            awg_weight_g=self.weight(awg.size.area_mm2, request),
            warnings=warnings,
        )

    @staticmethod
    def _collect_warnings(request, metric, awg, metric_drop, awg_drop, metric_prot, awg_prot,
                          min_metric, min_awg, temp_check) -> List[str]:
        warnings = []
        if temp_check.message:
            warnings.append(temp_check.message)

        for sel, drop in ((metric, metric_drop), (awg, awg_drop)):
            if sel.is_fallback:
                warnings.append(
                    f"Required area {sel.required_area_mm2:.2f} mm² exceeds the largest standard size "
                    f"{sel.size.display_name} by {sel.margin_mm2:.2f} mm². Use parallel conductors "
                    f"or shorten the run."
                )
            if drop.exceeds(request.max_drop_percent):
                warnings.append(
                    f"Voltage drop with {sel.size.display_name} is {drop.percent:.2f}%, "
                    f"above the {request.max_drop_percent:.2f}% limit."
                )

        for sel, prot in ((metric, metric_prot), (awg, awg_prot)):
            if prot.ampacity_a < request.current:
                warnings.append(
                    f"{sel.size.display_name} carries only {prot.ampacity_a:.1f} A under these conditions, "
                    f"below the {request.current:.1f} A load."
                )
            if not prot.fuse_within_limit:
                warnings.append(
                    f"Smallest standard fuse ({prot.fuse_a:g} A) exceeds the safe limit for "
                    f"{sel.size.display_name}."
                )

        for safe in (min_metric, min_awg):
            if not safe.is_safe:
                warnings.append(
                    f"No standard size safely carries {safe.required_a:.1f} A; largest available "
                    f"{safe.size.display_name} is rated {safe.ampacity_a:.1f} A."
                )
        return warnings
