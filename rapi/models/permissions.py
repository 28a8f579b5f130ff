import enum

__all__ = ("Permission",)


class Permission(str, enum.Enum):
    """A permission name as reported by the API in error bodies"""

    MANAGE_CHANNEL = "ManageChannel"
    MANAGE_SERVER = "ManageServer"
    MANAGE_PERMISSIONS = "ManagePermissions"
    MANAGE_ROLE = "ManageRole"
    MANAGE_CUSTOMISATION = "ManageCustomisation"
    KICK_MEMBERS = "KickMembers"
    BAN_MEMBERS = "BanMembers"
    TIMEOUT_MEMBERS = "TimeoutMembers"
    ASSIGN_ROLES = "AssignRoles"
    CHANGE_NICKNAME = "ChangeNickname"
    MANAGE_NICKNAMES = "ManageNicknames"
    CHANGE_AVATAR = "ChangeAvatar"
    REMOVE_AVATARS = "RemoveAvatars"
    VIEW_CHANNEL = "ViewChannel"
    READ_MESSAGE_HISTORY = "ReadMessageHistory"
    SEND_MESSAGE = "SendMessage"
    MANAGE_MESSAGES = "ManageMessages"
    MANAGE_WEBHOOKS = "ManageWebhooks"
    INVITE_OTHERS = "InviteOthers"
    SEND_EMBEDS = "SendEmbeds"
    UPLOAD_FILES = "UploadFiles"
    MASQUERADE = "Masquerade"
    REACT = "React"
    CONNECT = "Connect"
    SPEAK = "Speak"
    VIDEO = "Video"
    MUTE_MEMBERS = "MuteMembers"
    DEAFEN_MEMBERS = "DeafenMembers"
    MOVE_MEMBERS = "MoveMembers"
    GRANT_ALL_SAFE = "GrantAllSafe"
    GRANT_ALL = "GrantAll"

    # user permissions
    ACCESS = "Access"
    VIEW_PROFILE = "ViewProfile"
    INVITE = "Invite"
