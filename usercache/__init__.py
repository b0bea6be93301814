# usercache package initialization
