from aspect_attributes import HasAttributes, field


class User(HasAttributes):
    name = field(transform=lambda self, value: str(value).strip())
    moderator = field(query=True)
    admin = field(query=True)

    @admin.transform
    def admin(self, value):
        return getattr(self, "moderator?") and value


user = User(name="  Ezio Auditore  ", admin=True)
before_promotion = getattr(user, "admin?")

user.update_attributes(moderator=True, admin=True)
after_promotion = getattr(user, "admin?")
