"""
轻量依赖注入容器，用于解耦启动流程与链查询客户端、持久化存储的具体实现。
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


class Container:
    _instance: "Container" | None = None

    def __init__(self) -> None:
        self._factories: Dict[Type[Any], tuple[Callable[[], Any], bool]] = {}
        self._singletons: Dict[Type[Any], Any] = {}

    @classmethod
    def instance(cls) -> "Container":
        if cls._instance is None:
            cls._instance = Container()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def register(self, interface: Type[T], factory: Callable[[], T], singleton: bool = False) -> None:
        """注册依赖工厂。重复注册会覆盖旧工厂并丢弃已缓存的单例。"""
        self._factories[interface] = (factory, singleton)
        self._singletons.pop(interface, None)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """直接注册现成实例（测试中注入 stub 时常用）。"""
        self._factories[interface] = (lambda: instance, True)
        self._singletons[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        """获取依赖实例。"""
        if interface in self._singletons:
            return self._singletons[interface]

        factory_tuple = self._factories.get(interface)
        if not factory_tuple:
            raise ValueError(f"No factory registered for {interface}")

        factory, as_singleton = factory_tuple
        instance = factory()
        if as_singleton:
            self._singletons[interface] = instance
        return instance


def inject(*dependencies: Type[Any]):
    """
    类装饰器：为 __init__ 注入依赖。
    仅当调用方未显式传递对应 kwarg 时才注入，避免覆盖。

    kwarg 名称取自接口名：去掉 ``Port`` 后缀，再转为 snake_case，
    例如 ``ChainQueryPort`` -> ``chain_query``。
    """

    def decorator(cls):
        original_init = cls.__init__

        def new_init(self, *args, **kwargs):
            container = Container.instance()
            for dep in dependencies:
                kw_key = _kwarg_name(dep)
                if kw_key not in kwargs:
                    try:
                        kwargs[kw_key] = container.resolve(dep)
                    except ValueError:
                        pass  # 未注册则跳过
            original_init(self, *args, **kwargs)

        cls.__init__ = new_init
        return cls

    return decorator


def _kwarg_name(interface: Type[Any]) -> str:
    name = interface.__name__
    if name.endswith("Port") and len(name) > 4:
        name = name[:-4]
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i > 0 and not name[i - 1].isupper():
            out.append("_")
        out.append(ch.lower())
    return "".join(out)
