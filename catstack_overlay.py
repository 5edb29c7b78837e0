import pygame

class GameOverModal:
    """Blocking end-of-round message; returns once the player acknowledges it."""
    def __init__(self, screen, font, small_font):
        self.screen=screen; self.font=font; self.small_font=small_font
        self.shown=0

    def draw(self, score):
        w,h=self.screen.get_size()
        pw,ph=min(w-80,520),160
        px,py=(w-pw)//2,(h-ph)//2
        s=pygame.Surface((pw,ph),pygame.SRCALPHA); s.fill((20,25,40,230))
        self.screen.blit(s,(px,py))
        pygame.draw.rect(self.screen,(200,210,235),(px,py,pw,ph),1)
        msg=self.font.render(f"Game Over! Final Score: {score}",True,(255,255,255))
        self.screen.blit(msg,msg.get_rect(center=(w//2,py+60)))
        hint=self.small_font.render("Press any key to continue",True,(200,210,235))
        self.screen.blit(hint,hint.get_rect(center=(w//2,py+115)))

    def show(self, score) -> bool:
        """Draw and wait. False if the window was closed while waiting."""
        self.shown+=1
        self.draw(score); pygame.display.flip()
        clock=pygame.time.Clock()
        while True:
            for e in pygame.event.get():
                if e.type==pygame.QUIT: return False
                if e.type in (pygame.KEYDOWN,pygame.MOUSEBUTTONDOWN): return True
            clock.tick(30)
