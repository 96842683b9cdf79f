from cssbuilder.model.kinds import FragmentKind

__all__ = ["FragmentKind"]
